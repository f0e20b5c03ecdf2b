"""Inspection helpers for emitters."""

from .plan import PlanEntry, build_plan

__all__ = ["PlanEntry", "build_plan"]
