"""
Rule-based tag inference for code snippets.

Two tiers of rules run over the lowercased code text:

* generic rules, evaluated for every snippet;
* language rules, looked up by the declared language.

Each rule is an independent predicate paired with the tags it contributes.
Every rule is evaluated (no short-circuit) and the result is a set, so the
order of the tables never shows up in the output.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Callable, Dict, FrozenSet, Mapping, Optional, Tuple

from app.constants.languages import Language

Predicate = Callable[[str], bool]


def contains(*needles: str) -> Predicate:
    """True when any of ``needles`` occurs in the text."""
    return lambda text: any(needle in text for needle in needles)


def contains_all(*needles: str) -> Predicate:
    """True when every one of ``needles`` occurs in the text."""
    return lambda text: all(needle in text for needle in needles)


def matches(pattern: str) -> Predicate:
    compiled = re.compile(pattern)
    return lambda text: compiled.search(text) is not None


def either(*predicates: Predicate) -> Predicate:
    return lambda text: any(predicate(text) for predicate in predicates)


def always(text: str) -> bool:
    return True


@dataclass(frozen=True)
class TagRule:
    """A named predicate and the tags it adds when it holds."""

    name: str
    when: Predicate
    tags: Tuple[str, ...]

    def apply(self, text: str) -> FrozenSet[str]:
        return frozenset(self.tags) if self.when(text) else frozenset()


# Call-with-block syntax such as ``name(args) {``; control-flow keywords share
# the shape but are not definitions.
_BLOCK_DEFINITION = r"\b(?!(?:for|foreach|while|if|switch|catch)\b)\w+\s*\([^)]*\)\s*\{"
_ARROW_DEFINITION = r"\w+\s*=\s*\([^)]*\)\s*=>"

GENERIC_RULES: Tuple[TagRule, ...] = (
    TagRule(
        "loop",
        either(contains("for ", "while ", "foreach"), matches(r"for\s*\(")),
        ("loop",),
    ),
    TagRule("conditional", contains("switch", "case"), ("conditional",)),
    TagRule("error-handling", contains_all("try", "catch"), ("error-handling",)),
    TagRule(
        "function",
        either(
            contains("function ", "def ", "fun "),
            matches(_BLOCK_DEFINITION),
            matches(_ARROW_DEFINITION),
        ),
        ("function",),
    ),
    TagRule("class", contains("class "), ("oop",)),
    TagRule(
        "network-call",
        contains(
            "fetch(",
            "axios.",
            "http.",
            "request(",
            "xmlhttprequest",
            "ajax",
            "requests.",
            "curl ",
        ),
        ("api", "network"),
    ),
    TagRule(
        "print-debugging",
        contains(
            "console.log",
            "print(",
            "system.out.print",
            "debug",
            "fmt.println",
            "echo ",
        ),
        ("debugging",),
    ),
    TagRule(
        "arrays",
        either(
            contains("array", "list"),
            contains_all("[", "]"),
            matches(r"\[\s*\d"),
        ),
        ("arrays",),
    ),
    TagRule(
        "objects",
        either(
            contains("map", "hashmap", "dictionary"),
            contains_all("{", "}", ":"),
        ),
        ("objects",),
    ),
)

_WEB_SCRIPT_RULES: Tuple[TagRule, ...] = (
    TagRule(
        "array-methods",
        contains(".map(", ".filter(", ".reduce(", ".foreach("),
        ("array-methods",),
    ),
    TagRule("async-await", contains_all("async", "await"), ("async",)),
    TagRule("promise", contains("promise"), ("promise",)),
    TagRule(
        "react",
        contains("component", "props", "usestate", "useeffect"),
        ("react",),
    ),
)

_COMPILED_ENTRY_RULES: Tuple[TagRule, ...] = (
    TagRule(
        "entry-point",
        contains("public static void main", "namespace", "#include"),
        ("entry-point",),
    ),
)

_SHELL_RULES: Tuple[TagRule, ...] = (
    TagRule("shell-script", contains("echo ", "if ", "fi"), ("scripting",)),
    TagRule("shell-download", contains("curl ", "wget "), ("network",)),
)

LANGUAGE_RULES: Mapping[Language, Tuple[TagRule, ...]] = {
    Language.JAVASCRIPT: _WEB_SCRIPT_RULES,
    Language.TYPESCRIPT: _WEB_SCRIPT_RULES,
    Language.PYTHON: (
        TagRule(
            "data-science",
            contains("pandas", "matplotlib", "numpy"),
            ("data-science",),
        ),
        TagRule("python-class", contains_all("self.", "__init__"), ("oop",)),
    ),
    Language.JAVA: _COMPILED_ENTRY_RULES,
    Language.CSHARP: _COMPILED_ENTRY_RULES,
    Language.CPP: _COMPILED_ENTRY_RULES,
    Language.GO: (
        TagRule(
            "entry-point",
            contains_all("package main", "func main"),
            ("entry-point",),
        ),
    ),
    Language.RUST: (TagRule("entry-point", contains("fn main"), ("entry-point",)),),
    Language.PHP: (TagRule("php-web", contains("<?php", "echo "), ("web-dev",)),),
    Language.RUBY: (
        TagRule("ruby-script", contains_all("def ", "end"), ("scripting",)),
    ),
    Language.SWIFT: (TagRule("ios", contains("import swiftui", "func "), ("ios",)),),
    Language.KOTLIN: (
        TagRule("android", contains("fun ", "val ", "var "), ("android",)),
    ),
    Language.HTML: (
        TagRule(
            "markup",
            contains("<html", "<div", "<span"),
            ("markup", "web-dev"),
        ),
    ),
    Language.CSS: (
        TagRule("styling", contains("color:", "font-size:", "margin:"), ("styling",)),
    ),
    Language.SQL: (
        TagRule(
            "database",
            contains("select", "insert", "update", "delete"),
            ("database",),
        ),
    ),
    Language.BASH: _SHELL_RULES,
    Language.POWERSHELL: _SHELL_RULES,
    Language.OTHER: (TagRule("fallback", always, ("general",)),),
}


def _resolve_language(language: object) -> Optional[Language]:
    if isinstance(language, Language):
        return language
    if isinstance(language, str):
        try:
            return Language(language.strip().lower())
        except ValueError:
            return None
    return None


def evaluate(rules: Tuple[TagRule, ...], text: str) -> FrozenSet[str]:
    """Apply every rule to already-lowercased text and union the results."""
    tags: FrozenSet[str] = frozenset()
    for rule in rules:
        tags |= rule.apply(text)
    return tags


def infer_tags(code: str, language: object) -> FrozenSet[str]:
    """
    Infer descriptive tags for ``code`` declared as ``language``.

    Never raises: unknown languages only skip the language tier.
    """
    text = code.lower() if isinstance(code, str) else ""
    tags = evaluate(GENERIC_RULES, text)
    resolved = _resolve_language(language)
    if resolved is not None:
        tags |= evaluate(LANGUAGE_RULES.get(resolved, ()), text)
    return tags


def rule_table() -> Dict[str, Tuple[str, ...]]:
    """Rule names and tags per tier, for auditing which rules exist."""
    table: Dict[str, Tuple[str, ...]] = {
        f"generic:{rule.name}": rule.tags for rule in GENERIC_RULES
    }
    for language, rules in LANGUAGE_RULES.items():
        for rule in rules:
            table[f"{language.value}:{rule.name}"] = rule.tags
    return table
