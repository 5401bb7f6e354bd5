"""Scaffold plan: the ordered list of filesystem actions for one project.

``build_plan`` declares every directory and file of the generated Android
project as data.  It never touches the disk; ``ScaffoldWriter`` executes the
result.  Directories are always listed before the files written into them.

The support-library toggles do not change the plan.  They reach the build
descriptors through the template context instead (see
``_build.app.gradle.j2``), so the same set of files is produced for every
selection.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import PurePosixPath
from typing import Union

from .deriver import ResolvedConfig

# Environment-specific source sets under <module>/src
SOURCE_SETS: tuple[str, ...] = ("main", "debug", "release", "androidTest")

TOP_LEVEL_DIRS: tuple[str, ...] = ("art", "libraries")

_SKIPPED_SEGMENTS = frozenset({"", ".", ".."})


# ---------------------------------------------------------------------------
# Actions
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class MakeDirectory:
    path: str


@dataclass(frozen=True)
class RenderTemplate:
    template_id: str
    output_path: str
    context: ResolvedConfig


@dataclass(frozen=True)
class CopyVerbatim:
    source_id: str
    output_path: str
    executable: bool = False


@dataclass(frozen=True)
class CopyDirectoryTree:
    source_dir_id: str
    output_dir_path: str


OutputAction = Union[MakeDirectory, RenderTemplate, CopyVerbatim, CopyDirectoryTree]


def target_of(action: OutputAction) -> str:
    """Return the output path an action creates or writes."""
    if isinstance(action, MakeDirectory):
        return action.path
    if isinstance(action, CopyDirectoryTree):
        return action.output_dir_path
    return action.output_path


# ---------------------------------------------------------------------------
# Plan construction
# ---------------------------------------------------------------------------


def _join(*parts: str) -> str:
    """Join relative POSIX segments, keeping the result under the output root.

    Empty, ``.`` and ``..`` segments are dropped: ``_join("", "src")`` is
    ``"src"``, ``_join("java", "/com//app")`` is ``"java/com/app"`` and
    ``_join("../evil", "src")`` is ``"evil/src"``.
    """
    segments = [
        segment
        for part in parts
        for segment in part.split("/")
        if segment not in _SKIPPED_SEGMENTS
    ]
    return str(PurePosixPath(*segments))


def build_plan(config: ResolvedConfig) -> list[OutputAction]:
    """Return every action needed to scaffold the project described by *config*.

    The result depends on *config* alone, so two calls with the same config
    produce equal lists.
    """
    module = config.module_name
    src = _join(module, "src")
    main = _join(src, "main")
    java_dir = _join(main, "java", config.package_path)

    plan: list[OutputAction] = [CopyVerbatim("gitignore", ".gitignore")]

    # Basic dirs
    plan.append(MakeDirectory(_join(module)))
    plan.extend(MakeDirectory(d) for d in TOP_LEVEL_DIRS)
    plan.append(MakeDirectory(_join(module, "libs")))
    plan.append(MakeDirectory(src))
    plan.extend(MakeDirectory(_join(src, name)) for name in SOURCE_SETS)

    # Main source set
    plan.append(
        RenderTemplate("_AndroidManifest.xml.j2", _join(main, "AndroidManifest.xml"), config)
    )
    plan.append(MakeDirectory(java_dir))
    plan.append(
        RenderTemplate("_src/_MainActivity.java.j2", _join(java_dir, "MainActivity.java"), config)
    )
    plan.append(CopyDirectoryTree("_res", _join(main, "res")))
    plan.append(CopyVerbatim("proguard-rules.pro", _join(module, "proguard-rules.pro")))

    # Gradle
    plan.append(CopyDirectoryTree("gradle", "gradle"))
    plan.append(CopyDirectoryTree("tasks", "tasks"))
    plan.append(CopyVerbatim("gradle.properties", "gradle.properties"))
    plan.append(CopyVerbatim("gradlew", "gradlew", executable=True))
    plan.append(CopyVerbatim("gradlew.bat", "gradlew.bat"))
    plan.append(CopyVerbatim("version.properties", "version.properties"))
    plan.append(RenderTemplate("config.gradle.j2", "config.gradle", config))
    plan.append(RenderTemplate("_settings.gradle.j2", "settings.gradle", config))
    plan.append(RenderTemplate("_build.root.gradle.j2", "build.gradle", config))
    plan.append(
        RenderTemplate("_build.app.gradle.j2", _join(module, "build.gradle"), config)
    )
    return plan
