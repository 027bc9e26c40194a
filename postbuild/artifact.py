"""Read, patch and inspect the built HTML file."""

from postbuild.passes import BASIC_STYLE, PLACEHOLDER_TITLE, VIEWPORT_RE
from postbuild.rules import apply_rules


def read_artifact(path):
    # newline='' keeps CRLF and friends exactly as the build wrote them
    with open(path, 'r', encoding='utf-8', newline='') as f:
        return f.read()


def write_artifact(path, content):
    with open(path, 'w', encoding='utf-8', newline='') as f:
        f.write(content)


def patch_file(path, rules, strict=False):
    """
    Read the file, apply rules in memory, write the whole thing back.

    The file is rewritten even when nothing matched. OSError from the read or
    the write propagates to the caller; a failed read never creates the file.

    Returns:
        (content, applied) - the written text and the names of the rules that matched.
    """
    content = read_artifact(path)
    content, applied = apply_rules(content, rules, strict=strict)
    write_artifact(path, content)
    return content, applied


def count_viewport_tags(content):
    return len(VIEWPORT_RE.findall(content))


def inspect_artifact(path):
    """Check a built page for leftovers of an incomplete or doubled patch run."""
    issues = []
    content = read_artifact(path)

    viewports = count_viewport_tags(content)
    if viewports == 0:
        issues.append("Missing viewport meta (mobile)")
    elif viewports > 1:
        issues.append(f"{viewports} viewport meta tags (both passes ran?)")

    if PLACEHOLDER_TITLE in content:
        issues.append(f"Placeholder title still present: {PLACEHOLDER_TITLE}")

    if BASIC_STYLE in content:
        issues.append("Bare reset style not replaced by mobile CSS")

    return issues
