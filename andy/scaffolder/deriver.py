"""Derive the immutable ``ResolvedConfig`` from a collected ``AnswerSet``.

``derive`` is the only place where answers are interpreted: free text is
copied through, the package path is computed from the dotted package name,
and the support-library selection is normalized into a mapping that covers
every declared toggle.  Everything downstream (plan construction and template
rendering) reads the ``ResolvedConfig`` and nothing else.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from .collector import AnswerSet
from .schema import ANDROID_SCHEMA, AnswerSchema

PACKAGE_SEPARATOR = "."
PATH_DELIMITER = "/"

# Theme index -> Android style parent used by res/values/styles.xml
THEME_PARENTS: dict[int, str] = {
    0: "android:Theme",
    1: "android:Theme.Holo",
    2: "android:Theme.Holo.Light",
    3: "android:Theme.Holo.Light.DarkActionBar",
}


class SupportLibraries(BaseModel):
    """Enabled/disabled flag for every toggle plus the raw selection.

    ``enabled`` returns a fresh dict built from ``flags``.
    """

    model_config = ConfigDict(frozen=True)

    flags: tuple[tuple[str, bool], ...] = ()
    values: tuple[str, ...] = ()

    @property
    def enabled(self) -> dict[str, bool]:
        return dict(self.flags)


class ResolvedConfig(BaseModel):
    """Fully derived configuration of the project being generated."""

    model_config = ConfigDict(frozen=True)

    application_name: str
    module_name: str
    package_name: str
    package_path: str
    minimum_api_level: int
    target_sdk_version: int
    compile_sdk_version: int
    java_language_level: str
    theme: int
    support_libraries: SupportLibraries
    artifact_coordinates: tuple[tuple[str, str], ...] = Field(
        default=(),
        description="(toggle identifier, Maven coordinate) pairs",
    )

    @property
    def artifacts(self) -> dict[str, str]:
        """Toggle identifier -> Maven coordinate."""
        return dict(self.artifact_coordinates)

    @property
    def theme_parent(self) -> str:
        return THEME_PARENTS.get(self.theme, THEME_PARENTS[0])

    @property
    def enabled_artifacts(self) -> list[str]:
        """Coordinates of the enabled toggles, in declaration order."""
        artifacts = self.artifacts
        return [
            artifacts[identifier]
            for identifier, on in self.support_libraries.flags
            if on and artifacts.get(identifier)
        ]

    def template_context(self) -> dict[str, Any]:
        """Return the variables every template is rendered with."""
        context = self.model_dump(exclude={"support_libraries", "artifact_coordinates"})
        context.update(
            support_libraries={
                "enabled": self.support_libraries.enabled,
                "values": list(self.support_libraries.values),
            },
            artifacts=self.artifacts,
            theme_parent=self.theme_parent,
            enabled_artifacts=self.enabled_artifacts,
        )
        return context


def package_path_for(package_name: str) -> str:
    """``"com.application.app"`` -> ``"com/application/app"``.

    Only the separator is replaced; empty segments survive unchanged.
    """
    return package_name.replace(PACKAGE_SEPARATOR, PATH_DELIMITER)


def derive(answers: AnswerSet, schema: AnswerSchema = ANDROID_SCHEMA) -> ResolvedConfig:
    """Turn raw answers into a ``ResolvedConfig``.

    SDK levels, language level, and theme are passed through unchanged; the
    collector's providers already constrained them to the schema choices.
    """
    selected = tuple(answers.support_libraries or ())
    return ResolvedConfig(
        application_name=answers.application_name,
        module_name=answers.module_name,
        package_name=answers.package_name,
        package_path=package_path_for(answers.package_name),
        minimum_api_level=answers.minimum_api_level,
        target_sdk_version=answers.target_sdk,
        compile_sdk_version=answers.compile_sdk_version,
        java_language_level=answers.java_language_level,
        theme=answers.theme,
        support_libraries=SupportLibraries(
            flags=tuple(schema.normalize(selected).items()),
            values=selected,
        ),
        artifact_coordinates=tuple(
            (toggle.identifier, toggle.artifact) for toggle in schema.toggles
        ),
    )
