from . import emit_jsonl, io_text

__all__ = ["emit_jsonl", "io_text"]
