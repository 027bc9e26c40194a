#!/usr/bin/env python3
"""
Post-build patches for dist/index.html.

    add-viewport               viewport meta + "Hangman Game" title
    build-mobile-responsive    mobile CSS + long title
    postbuild all              both in one pass, one title, one viewport tag
    postbuild check            report leftovers / doubled tags
"""

import sys
from pathlib import Path

import click

from postbuild import config
from postbuild.artifact import count_viewport_tags, inspect_artifact, patch_file
from postbuild.mobile_css import MOBILE_CSS
from postbuild.passes import mobile_rules, unified_rules, viewport_rules
from postbuild.rules import MissingMarkerError

MOBILE_FEATURES = [
    "Mobile-first responsive design",
    "Touch-friendly buttons (minimum 48px height)",
    "Flexible layouts for small screens",
    "Proper viewport meta tag",
    "Accessibility improvements",
    "Modern UI with gradients and shadows",
]

path_option = click.option(
    '--path', 'path', type=click.Path(path_type=Path), default=None,
    help='HTML file to patch (default: $HANGMAN_HTML_PATH or dist/index.html)')
title_option = click.option('--title', default=None, help='Title to put in place of <title>Main</title>')
css_option = click.option(
    '--css-file', type=click.Path(exists=True, dir_okay=False, path_type=Path), default=None,
    help='Use this file as the mobile CSS payload instead of the built-in one')
strict_option = click.option('--strict', is_flag=True, help='Fail if any marker is missing')


def _load_css(css_file):
    if css_file is None:
        return MOBILE_CSS
    return css_file.read_text(encoding='utf-8')


def _run(path, rules, strict, error_prefix):
    """Patch the file or exit 1 with the error on stderr."""
    try:
        return patch_file(path, rules, strict=strict)
    except (OSError, UnicodeDecodeError, MissingMarkerError) as e:
        click.echo(f"❌ {error_prefix}: {e}", err=True)
        sys.exit(1)


def _warn_duplicate_viewports(content):
    n = count_viewport_tags(content)
    if n > 1:
        click.echo(f"⚠️  {n} viewport meta tags in the page - the passes overlap, use `postbuild all`")


@click.command()
@path_option
@title_option
@strict_option
def add_viewport(path, title, strict):
    """Add the viewport meta tag after the charset tag and set the title."""
    path = path or config.get_html_path()
    title = title if title is not None else config.get_viewport_title()

    click.echo("Adding viewport meta tag to generated HTML...")
    content, applied = _run(path, viewport_rules(title), strict, "Error adding viewport meta tag")

    if 'viewport' in applied:
        click.echo("✓ Viewport meta tag added successfully")
    else:
        click.echo("⏭️  No bare charset tag found, viewport not added")
    if 'title' in applied:
        click.echo(f'✓ Title updated to "{title}"')
    _warn_duplicate_viewports(content)


@click.command()
@path_option
@title_option
@css_option
@strict_option
def build_mobile_responsive(path, title, css_file, strict):
    """Swap the bare reset style for the mobile-responsive stylesheet and set the title."""
    path = path or config.get_html_path()
    title = title if title is not None else config.get_mobile_title()

    content, applied = _run(path, mobile_rules(title, _load_css(css_file)), strict,
                            "Error processing HTML file")

    if 'mobile_css' in applied:
        click.echo(f"✅ Mobile-responsive CSS has been injected into {path}")
        click.echo("📱 The app now includes:")
        for feature in MOBILE_FEATURES:
            click.echo(f"   - {feature}")
    else:
        click.echo(f"⏭️  No bare reset style in {path}, mobile CSS not injected")
    if 'title' in applied:
        click.echo(f'✓ Title updated to "{title}"')
    _warn_duplicate_viewports(content)


@click.command(name='all')
@path_option
@title_option
@css_option
@strict_option
def patch_all(path, title, css_file, strict):
    """Mobile CSS, viewport and title in one ordered pass."""
    path = path or config.get_html_path()
    title = title if title is not None else config.get_mobile_title()

    click.echo(f"Patching {path}...")
    _, applied = _run(path, unified_rules(title, _load_css(css_file)), strict,
                      "Error processing HTML file")
    for name in applied:
        click.echo(f"  ✓ {name}")
    click.echo(f"\nDone! Applied {len(applied)} of 3 patches.")


@click.command()
@path_option
def check(path):
    """Report viewport/title/style problems in the built page."""
    path = path or config.get_html_path()
    try:
        issues = inspect_artifact(path)
    except (OSError, UnicodeDecodeError) as e:
        click.echo(f"❌ Error reading HTML file: {e}", err=True)
        sys.exit(1)

    if issues:
        click.echo(f"❌ {path.name}")
        for issue in issues:
            click.echo(f"   - {issue}")
        sys.exit(1)
    click.echo(f"✅ {path.name}")


@click.group()
def cli():
    """Patch the exported Hangman web build."""


cli.add_command(add_viewport, name='viewport')
cli.add_command(build_mobile_responsive, name='mobile')
cli.add_command(patch_all)
cli.add_command(check)


if __name__ == "__main__":
    cli()
