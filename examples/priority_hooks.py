"""Example: save hooks that must run in a fixed order regardless of import order."""

from __future__ import annotations

from weightemit import ListenerWrapper, WeightedEmitter, current_emitter


def audit(document: dict) -> None:
    print(f"audit: {document['id']}")


def validate(document: dict) -> None:
    if not document.get("title"):
        raise ValueError("Document needs a title")
    print("validate: ok")


def notify(document: dict) -> None:
    print(f"notify: saved {document['id']}")
    current_emitter().emit("notified", document["id"])


def main() -> None:
    emitter = WeightedEmitter()
    (
        emitter.on("saved", notify)
        .on("saved.100", validate)
        .on("saved.Infinity", audit)
        .once("notified", ListenerWrapper(lambda doc_id: print(f"first notification for {doc_id}")))
    )
    emitter.emit("saved", {"id": 1, "title": "Hello"})
    emitter.emit("saved", {"id": 2, "title": "Again"})


if __name__ == "__main__":
    main()
