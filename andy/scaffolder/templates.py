"""Jinja2 template rendering and file copying for the scaffold writer.

Provides the TemplateRenderer class which loads templates and static files
from the ``andy/scaffolder/templates/`` directory.  Template identifiers and
source identifiers are paths relative to that root.  Supports single-file
rendering, verbatim copies, and whole-tree copies in which ``.j2`` files are
rendered and everything else is copied byte-for-byte.
"""

from __future__ import annotations

import shutil
import stat
from pathlib import Path
from typing import Any

from jinja2 import Environment, FileSystemLoader, StrictUndefined, select_autoescape

# ---------------------------------------------------------------------------
# Template directory discovery
# ---------------------------------------------------------------------------

_DEFAULT_TEMPLATE_DIR = Path(__file__).parent / "templates"

TEMPLATE_SUFFIX = ".j2"


# ---------------------------------------------------------------------------
# TemplateRenderer
# ---------------------------------------------------------------------------


class TemplateRenderer:
    """Renders Jinja2 templates and copies static files into a project.

    Templates are rendered with a context dictionary, normally
    ``ResolvedConfig.template_context()``.  Undefined variables raise instead
    of rendering as empty strings.
    """

    def __init__(self, template_dir: str | Path | None = None) -> None:
        if template_dir is None:
            template_dir = _DEFAULT_TEMPLATE_DIR
        self.template_dir = Path(template_dir)
        self.env = Environment(
            loader=FileSystemLoader(str(self.template_dir)),
            autoescape=select_autoescape([]),
            undefined=StrictUndefined,
            keep_trailing_newline=True,
            trim_blocks=True,
            lstrip_blocks=True,
        )

    # -- Rendering ---------------------------------------------------------

    def render(self, template_path: str, context: dict[str, Any]) -> str:
        """Render a single template with the provided context.

        Args:
            template_path: Path relative to the template directory (e.g.
                ``"_src/_MainActivity.java.j2"``).
            context: Dictionary of variables available inside the template.

        Returns:
            The rendered template content as a string.
        """
        template = self.env.get_template(template_path)
        return template.render(**context)

    def render_string(self, template_string: str, context: dict[str, Any]) -> str:
        """Render an inline template string with the provided context."""
        template = self.env.from_string(template_string)
        return template.render(**context)

    def render_to_file(
        self,
        template_path: str,
        output_path: str | Path,
        context: dict[str, Any],
    ) -> Path:
        """Render a template and write the result to *output_path*.

        The parent directory must already exist.
        """
        content = self.render(template_path, context)
        out = Path(output_path)
        out.write_text(content, encoding="utf-8")
        return out

    # -- Copying -----------------------------------------------------------

    def copy_file(
        self,
        source_path: str,
        output_path: str | Path,
        *,
        executable: bool = False,
    ) -> Path:
        """Copy a static file from the template root to *output_path*."""
        out = Path(output_path)
        shutil.copyfile(self.template_dir / source_path, out)
        if executable:
            _make_executable(out)
        return out

    def copy_tree(
        self,
        source_dir: str,
        output_dir: str | Path,
        context: dict[str, Any],
    ) -> list[Path]:
        """Copy every file under *source_dir* into *output_dir*.

        The directory structure is preserved.  Files ending in ``.j2`` are
        rendered with *context* and written without the suffix, so
        ``_res/values/styles.xml.j2`` lands at ``<output_dir>/values/styles.xml``.

        Returns:
            List of written file paths, in sorted source order.
        """
        source_root = self.template_dir / source_dir
        if not source_root.is_dir():
            raise FileNotFoundError(f"Template directory not found: {source_root}")

        written: list[Path] = []
        out_base = Path(output_dir)
        out_base.mkdir(parents=True, exist_ok=True)

        for source_file in sorted(source_root.rglob("*")):
            if not source_file.is_file():
                continue
            rel = source_file.relative_to(source_root)
            target = out_base / rel
            target.parent.mkdir(parents=True, exist_ok=True)

            if source_file.name.endswith(TEMPLATE_SUFFIX):
                target = target.with_name(source_file.name[: -len(TEMPLATE_SUFFIX)])
                template_key = f"{source_dir}/{rel.as_posix()}"
                self.render_to_file(template_key, target, context)
            else:
                shutil.copyfile(source_file, target)
            written.append(target)

        return written

    # -- Utility -----------------------------------------------------------

    def list_templates(self, prefix: str = "") -> list[str]:
        """Return a sorted list of all ``.j2`` template paths under *prefix*.

        Paths are relative to the template root directory.
        """
        search_dir = self.template_dir / prefix if prefix else self.template_dir
        if not search_dir.is_dir():
            return []
        return sorted(
            p.relative_to(self.template_dir).as_posix()
            for p in search_dir.rglob(f"*{TEMPLATE_SUFFIX}")
        )


# ---------------------------------------------------------------------------
# Internal helpers
# ---------------------------------------------------------------------------


def _make_executable(path: Path) -> None:
    """Set the executable bit on a file."""
    current = path.stat().st_mode
    path.chmod(current | stat.S_IXUSR | stat.S_IXGRP | stat.S_IXOTH)
