"""Paradigm classification of single-file components.

Detection is pure pattern matching over raw text: no parsing, no AST. A
component's style is decided by an ordered rule list, first match wins:

    1. template-only  (template region, no script region)
    2. composition    (any composition signal)
    3. options        (any options signal)
    4. unclassified   (has a script region but no signal matched)

Anything left over (no template, no script, no signal) gets no
classification at all. Overlaps are resolved purely by rule order, so a file
carrying both composition and options signals is composition.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Callable, Optional

from ..models import Classification

_I = re.IGNORECASE

TEMPLATE_OPEN = re.compile(r"<template[^>]*>", _I)
SCRIPT_OPEN = re.compile(r"<script[^>]*>", _I)
SCRIPT_REGION = re.compile(r"<script[^>]*>([\s\S]*?)</script>", _I)

# Case-sensitive on purpose: only the literal options form suppresses computed().
OPTIONS_COMPUTED_BLOCK = re.compile(r"computed\s*:\s*\{")


@dataclass(frozen=True)
class Signal:
    """A named text pattern.

    ``unless`` vetoes the match when that second pattern is also present.
    """

    name: str
    pattern: re.Pattern
    unless: Optional[re.Pattern] = None

    def matches(self, content: str) -> bool:
        if not self.pattern.search(content):
            return False
        return self.unless is None or not self.unless.search(content)


def _signal(name: str, regex: str, unless: Optional[re.Pattern] = None) -> Signal:
    return Signal(name, re.compile(regex, _I), unless)


COMPOSITION_SIGNALS: tuple[Signal, ...] = (
    _signal("script_setup", r"<script\s+setup\s*>"),
    _signal("script_lang_setup", r'<script\s+lang="[^"]+"\s+setup\s*>'),
    _signal("define_component", r"\bdefineComponent\s*\("),
    _signal("setup_function", r"\bsetup\s*\([^)]*\)\s*\{"),
    _signal("ref", r"\bref\s*\("),
    _signal("reactive", r"\breactive\s*\("),
    _signal("to_ref", r"\btoRef\s*\("),
    _signal("computed_call", r"\bcomputed\s*\(", unless=OPTIONS_COMPUTED_BLOCK),
    _signal("define_props", r"\bdefineProps\s*[<(]"),
    _signal("define_emits", r"\bdefineEmits\s*[<(]"),
    _signal("with_defaults", r"\bwithDefaults\s*\("),
)

OPTIONS_SIGNALS: tuple[Signal, ...] = (
    _signal("data_method", r"data\s*\(\s*\)\s*\{"),
    _signal("data_function", r"data\s*:\s*\(?function\s*\(\s*\)\s*\{"),
    _signal("data_object", r"data\s*:\s*\{"),
    _signal("methods", r"methods\s*:\s*\{"),
    _signal("computed", r"computed\s*:\s*\{"),
    _signal("watch", r"watch\s*:\s*\{"),
    _signal("props_object", r"props\s*:\s*\{"),
    _signal("props_array", r"props\s*:\s*\["),
    _signal("components", r"components\s*:\s*\{"),
    _signal("filters", r"filters\s*:\s*\{"),
    _signal("mixins", r"mixins\s*:\s*\["),
    _signal("created", r"created\s*\(\s*\)\s*\{"),
    _signal("mounted", r"mounted\s*\(\s*\)\s*\{"),
    _signal("before_mount", r"beforeMount\s*\(\s*\)\s*\{"),
    _signal("before_create", r"beforeCreate\s*\(\s*\)\s*\{"),
    _signal("name_field", r"name\s*:\s*['\"]"),
    # Catch-all: any default-exported object literal.
    _signal("export_default_object", r"export\s+default\s*\{"),
)


def has_template_region(content: str) -> bool:
    return TEMPLATE_OPEN.search(content) is not None


def has_script_region(content: str) -> bool:
    return SCRIPT_OPEN.search(content) is not None


def is_template_only(content: str) -> bool:
    return has_template_region(content) and not has_script_region(content)


def matching_signals(content: str, signals: tuple[Signal, ...]) -> tuple[str, ...]:
    """Names of every signal in ``signals`` that matches ``content``."""
    return tuple(signal.name for signal in signals if signal.matches(content))


def has_composition_signal(content: str) -> bool:
    return any(signal.matches(content) for signal in COMPOSITION_SIGNALS)


def has_options_signal(content: str) -> bool:
    return any(signal.matches(content) for signal in OPTIONS_SIGNALS)


# Evaluated top to bottom; the first predicate that holds decides the label.
CLASSIFICATION_RULES: tuple[tuple[Callable[[str], bool], Classification], ...] = (
    (is_template_only, Classification.TEMPLATE_ONLY),
    (has_composition_signal, Classification.COMPOSITION),
    (has_options_signal, Classification.OPTIONS),
    (has_script_region, Classification.UNCLASSIFIED),
)


def classify(content: str) -> Optional[Classification]:
    """Classify component source text.

    Returns:
        The first matching Classification, or None when the text has no
        template, no script and no recognised signal.
    """
    for predicate, label in CLASSIFICATION_RULES:
        if predicate(content):
            return label
    return None


def extract_script(content: str) -> str:
    """Inner text of the first script region, stripped; empty if there is none."""
    match = SCRIPT_REGION.search(content)
    return match.group(1).strip() if match else ""


@dataclass(frozen=True)
class ClassificationTrace:
    """Classification plus every signal that fired, for tuning the heuristics."""

    classification: Optional[Classification]
    has_template: bool
    has_script: bool
    composition_signals: tuple[str, ...]
    options_signals: tuple[str, ...]


def explain(content: str) -> ClassificationTrace:
    """Classify ``content`` and report all matching signals.

    Signals are evaluated exhaustively here, unlike ``classify`` which stops
    at the first matching rule. The label is always identical to ``classify``.
    """
    return ClassificationTrace(
        classification=classify(content),
        has_template=has_template_region(content),
        has_script=has_script_region(content),
        composition_signals=matching_signals(content, COMPOSITION_SIGNALS),
        options_signals=matching_signals(content, OPTIONS_SIGNALS),
    )
