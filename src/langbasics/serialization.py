"""
Serialization helpers for Transcript objects.

Provides lossless JSON/YAML round-trip via intermediate dict representation.
The runtime-only echo flag is not serialized; restored transcripts never
print.
"""
from __future__ import annotations

import json
from typing import Any, Dict

import yaml

from langbasics.model import Transcript


def transcript_to_dict(t: Transcript) -> Dict[str, Any]:
    return {"program": t.program, "lines": list(t.lines)}


def transcript_from_dict(d: Any) -> Transcript:
    if not isinstance(d, dict):
        raise TypeError(f"Expected a mapping for Transcript, got {type(d).__name__}")
    if "program" not in d:
        raise ValueError("Transcript dict is missing 'program'")
    lines = d.get("lines", [])
    if not isinstance(lines, list) or not all(isinstance(line, str) for line in lines):
        raise ValueError("Transcript 'lines' must be a list of strings")
    return Transcript(program=d["program"], lines=list(lines), echo=False)


def transcript_to_json(t: Transcript) -> str:
    return json.dumps(transcript_to_dict(t), sort_keys=True)


def transcript_from_json(s: str) -> Transcript:
    d = json.loads(s)
    return transcript_from_dict(d)


def transcript_to_yaml(t: Transcript) -> str:
    return yaml.safe_dump(transcript_to_dict(t))


def transcript_from_yaml(s: str) -> Transcript:
    d = yaml.safe_load(s)
    return transcript_from_dict(d)
