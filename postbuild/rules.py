"""
Ordered substitution rules for the built HTML.

Every rule touches only the FIRST occurrence of its marker. A marker that
isn't there is skipped quietly unless the rule (or the run) is strict.
"""

import re


class MissingMarkerError(ValueError):
    """A required marker was not found in the content."""

    def __init__(self, rule_name):
        super().__init__(f"marker for '{rule_name}' not found")
        self.rule_name = rule_name


class Rule:
    """One search/replace step.

    pattern is matched verbatim unless regex=True. For regex rules the
    replacement can be a callable that gets the match object.
    If `unless` (a substring or a compiled regex) is already in the content
    the rule is skipped.
    """

    def __init__(self, name, pattern, replacement, required=False, regex=False, unless=None):
        self.name = name
        self.pattern = pattern
        self.replacement = replacement
        self.required = required
        self.regex = regex
        self.unless = unless

    def __repr__(self):
        return f"Rule({self.name!r})"

    def apply(self, content):
        """Returns (new_content, matched)."""
        if self.regex:
            return _apply_regex(content, self.pattern, self.replacement)
        if self.pattern not in content:
            return content, False
        return content.replace(self.pattern, self.replacement, 1), True


def _apply_regex(content, pattern, replacement):
    if isinstance(replacement, str):
        # literal replacement text, no backreference processing
        text = replacement
        replacement = lambda m: text
    new_content, n = re.subn(pattern, replacement, content, count=1)
    return new_content, n > 0


def _present(marker, content):
    if isinstance(marker, str):
        return marker in content
    return marker.search(content) is not None


def apply_rules(content, rules, strict=False):
    """
    Apply rules in order, each one against the previous result.

    Returns:
        (content, applied) where applied is the list of rule names that matched.

    Raises:
        MissingMarkerError: a required rule (or any rule when strict) missed.
    """
    applied = []
    for rule in rules:
        if rule.unless and _present(rule.unless, content):
            continue
        content, matched = rule.apply(content)
        if matched:
            applied.append(rule.name)
        elif rule.required or strict:
            raise MissingMarkerError(rule.name)
    return content, applied
