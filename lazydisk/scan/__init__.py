"""Scan protocol: background walker, instruction messages, and their consumer."""

from __future__ import annotations

from .instructions import EntryDiscovered, Instruction, ProgressTick, ReadFailed, ScanComplete
from .scanner import PROGRESS_TICK_ENTRIES, Scanner
from .consumer import (
    DEFAULT_INSTRUCTION_BATCH,
    InstructionEffect,
    apply_instruction,
    drain_instructions,
    handle_instructions,
    is_under_cursor,
)

__all__ = [
    "EntryDiscovered",
    "ReadFailed",
    "ProgressTick",
    "ScanComplete",
    "Instruction",
    "Scanner",
    "PROGRESS_TICK_ENTRIES",
    "DEFAULT_INSTRUCTION_BATCH",
    "InstructionEffect",
    "apply_instruction",
    "drain_instructions",
    "handle_instructions",
    "is_under_cursor",
]
