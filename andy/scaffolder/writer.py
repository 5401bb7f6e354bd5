"""Execute a scaffold plan against the filesystem.

Actions are applied strictly in plan order, one at a time, each in a worker
thread so the event loop stays responsive.  The first failure stops the run
and is raised as ``WriteFailure``; files written before it are left in place.
"""

from __future__ import annotations

import asyncio
from collections.abc import Iterable
from pathlib import Path
from typing import Any

from jinja2 import TemplateError

from andy.utils import print_action

from .plan import (
    CopyDirectoryTree,
    CopyVerbatim,
    MakeDirectory,
    OutputAction,
    RenderTemplate,
    target_of,
)
from .templates import TemplateRenderer


class WriteFailure(Exception):
    """Raised when an action of the plan cannot be applied."""

    def __init__(self, action: OutputAction, cause: BaseException) -> None:
        self.action = action
        self.cause = cause
        super().__init__(f"Failed to write '{target_of(action)}': {cause}")


class ScaffoldWriter:
    """Applies ``OutputAction`` values under *output_root*.

    Attributes:
        renderer: Template renderer that owns the template root.
        output_root: Directory the plan's relative paths are resolved against.
            It is created if missing.
        context: Variables used for ``.j2`` files inside copied trees.
            ``RenderTemplate`` actions carry their own context.
        verbose: Print one status line per created path.
    """

    def __init__(
        self,
        renderer: TemplateRenderer,
        output_root: str | Path,
        context: dict[str, Any] | None = None,
        *,
        verbose: bool = True,
    ) -> None:
        self.renderer = renderer
        self.output_root = Path(output_root)
        self.context = context or {}
        self.verbose = verbose

    async def execute(self, plan: Iterable[OutputAction]) -> list[Path]:
        """Apply every action of *plan* in order.

        Returns:
            Paths of every file written (directories are not included).

        Raises:
            WriteFailure: On the first action that raises ``OSError`` or a
                Jinja2 ``TemplateError``.
        """
        try:
            await asyncio.to_thread(self.output_root.mkdir, parents=True, exist_ok=True)
        except OSError as exc:
            raise WriteFailure(MakeDirectory("."), exc) from exc

        written: list[Path] = []
        for action in plan:
            try:
                written.extend(await asyncio.to_thread(self._apply, action))
            except (OSError, TemplateError) as exc:
                raise WriteFailure(action, exc) from exc
        return written

    # -- Dispatch ----------------------------------------------------------

    def _apply(self, action: OutputAction) -> list[Path]:
        if isinstance(action, MakeDirectory):
            self._make_directory(action)
            return []

        if isinstance(action, CopyDirectoryTree):
            out_dir = self.output_root / action.output_dir_path
            existing = (
                {p for p in out_dir.rglob("*") if p.is_file()} if out_dir.is_dir() else set()
            )
            files = self.renderer.copy_tree(action.source_dir_id, out_dir, self.context)
            for path in files:
                self._report("force" if path in existing else "create", path)
            return files

        target = self.output_root / target_of(action)
        status = "force" if target.exists() else "create"
        if isinstance(action, RenderTemplate):
            self.renderer.render_to_file(
                action.template_id, target, action.context.template_context()
            )
        elif isinstance(action, CopyVerbatim):
            self.renderer.copy_file(action.source_id, target, executable=action.executable)
        else:
            raise TypeError(f"Unknown output action: {action!r}")
        self._report(status, target)
        return [target]

    def _make_directory(self, action: MakeDirectory) -> None:
        path = self.output_root / action.path
        if path.is_dir():
            self._report("exists", path)
            return
        path.mkdir(parents=True)
        self._report("create", path)

    def _report(self, status: str, path: Path) -> None:
        if not self.verbose:
            return
        try:
            shown = path.relative_to(self.output_root).as_posix()
        except ValueError:
            shown = str(path)
        print_action(status, shown)
