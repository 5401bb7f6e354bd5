"""Answer schema: every question the generator asks, with its choices and default.

The schema is pure data.  ``FieldSpec`` validates its own default against its
choice list when it is constructed, so a broken declaration fails at import
time instead of halfway through a prompt session.
"""

from __future__ import annotations

from collections.abc import Iterable
from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, model_validator


class InvalidFieldSpec(Exception):
    """Raised when a field declaration contradicts its own choice list."""

    def __init__(self, key: str, message: str) -> None:
        self.key = key
        super().__init__(f"Field '{key}': {message}")


# ---------------------------------------------------------------------------
# Declarations
# ---------------------------------------------------------------------------


class FieldKind(str, Enum):
    TEXT = "text"
    SINGLE = "single"
    MULTI = "multi"


class Choice(BaseModel):
    """One selectable option: what the user sees and what gets stored."""

    model_config = ConfigDict(frozen=True)

    label: str
    value: str | int


class FieldSpec(BaseModel):
    """A single prompt: key, message, kind, optional choices and default."""

    model_config = ConfigDict(frozen=True)

    key: str
    message: str
    kind: FieldKind = FieldKind.TEXT
    choices: tuple[Choice, ...] | None = None
    default: Any = None

    @model_validator(mode="after")
    def _check_default(self) -> "FieldSpec":
        if self.kind is FieldKind.TEXT:
            if self.choices is not None:
                raise InvalidFieldSpec(self.key, "free-text fields take no choices")
            return self

        if not self.choices:
            raise InvalidFieldSpec(self.key, f"{self.kind.value} field needs choices")

        values = self.values()
        if self.kind is FieldKind.SINGLE:
            if self.default not in values:
                raise InvalidFieldSpec(
                    self.key, f"default {self.default!r} is not one of its choices"
                )
        else:
            for item in self.default or ():
                if item not in values:
                    raise InvalidFieldSpec(
                        self.key, f"default entry {item!r} is not one of its choices"
                    )
        return self

    def values(self) -> list[str | int]:
        """Return the stored values of every choice, in order."""
        return [choice.value for choice in self.choices or ()]

    def label_for(self, value: Any) -> str:
        """Return the display label for *value*, or ``str(value)`` if unknown."""
        for choice in self.choices or ():
            if choice.value == value:
                return choice.label
        return str(value)


class ModuleToggle(BaseModel):
    """An optional dependency module the generated build can pull in."""

    model_config = ConfigDict(frozen=True)

    identifier: str
    label: str
    default_enabled: bool = False
    artifact: str = ""


class AnswerSchema:
    """Ordered field declarations plus the optional-module toggles."""

    def __init__(
        self,
        fields: Iterable[FieldSpec],
        toggles: Iterable[ModuleToggle],
    ) -> None:
        self.fields: tuple[FieldSpec, ...] = tuple(fields)
        self.toggles: tuple[ModuleToggle, ...] = tuple(toggles)
        self._by_key = {spec.key: spec for spec in self.fields}

    def __iter__(self):
        return iter(self.fields)

    def __len__(self) -> int:
        return len(self.fields)

    def field(self, key: str) -> FieldSpec:
        return self._by_key[key]

    def toggle_ids(self) -> list[str]:
        return [toggle.identifier for toggle in self.toggles]

    def normalize(self, selected: Iterable[str] | None) -> dict[str, bool]:
        """Map every toggle identifier to whether it appears in *selected*.

        The result always covers the full toggle list, in declaration order.
        ``None`` and an empty selection both yield every toggle ``False``;
        identifiers that are not declared toggles are ignored.
        """
        chosen = set(selected or ())
        return {toggle.identifier: toggle.identifier in chosen for toggle in self.toggles}


# ---------------------------------------------------------------------------
# Android project schema
# ---------------------------------------------------------------------------

_ANDROID_RELEASES = [
    "Android 1.0",
    "Android 1.1",
    "Android 1.5 (Cupcake)",
    "Android 1.6 (Donut)",
    "Android 2.0 (Eclair)",
    "Android 2.0.1 (Eclair)",
    "Android 2.1 (Eclair)",
    "Android 2.2 (Froyo)",
    "Android 2.3 (Gingerbread)",
    "Android 2.3.3 (Gingerbread)",
    "Android 3.0 (Honeycomb)",
    "Android 3.1 (Honeycomb)",
    "Android 3.2 (Honeycomb)",
    "Android 4.0 (Ice Cream Sandwich)",
    "Android 4.0.3 (Ice Cream Sandwich)",
    "Android 4.1 (Jelly Bean)",
    "Android 4.2 (Jelly Bean)",
    "Android 4.3 (Jelly Bean)",
    "Android 4.4.2 (KitKat)",
]

SDK_VERSION_CHOICES: tuple[Choice, ...] = tuple(
    Choice(label=f"API {level}: {release}", value=level)
    for level, release in enumerate(_ANDROID_RELEASES, start=1)
)

JAVA_LEVEL_CHOICES: tuple[Choice, ...] = (
    Choice(label="6.0 – @Override in interfaces", value="VERSION_1_6"),
    Choice(label="7.0 – Diamonds, ARM, multi-catch…", value="VERSION_1_7"),
)

THEME_CHOICES: tuple[Choice, ...] = tuple(
    Choice(label=label, value=index)
    for index, label in enumerate(
        ["None", "Holo Dark", "Holo Light", "Holo Light with Dark Action Bar"]
    )
)

SUPPORT_LIBRARIES: tuple[ModuleToggle, ...] = (
    ModuleToggle(
        identifier="playServices",
        label="PlayServices",
        artifact="com.google.android.gms:play-services:+",
    ),
    ModuleToggle(
        identifier="supportV4",
        label="Support",
        artifact="com.android.support:support-v4:+",
    ),
    ModuleToggle(
        identifier="appCompat",
        label="AppCompat",
        artifact="com.android.support:appcompat-v7:+",
    ),
    ModuleToggle(
        identifier="gridLayout",
        label="GridLayout",
        artifact="com.android.support:gridlayout-v7:+",
    ),
    ModuleToggle(
        identifier="mediaRouter",
        label="MediaRouter",
        artifact="com.android.support:mediarouter-v7:+",
    ),
)


def _build_android_schema() -> AnswerSchema:
    fields = [
        FieldSpec(key="applicationName", message="Application name:", default="My Application"),
        FieldSpec(key="moduleName", message="Module name:", default="mobile"),
        FieldSpec(key="packageName", message="Package name:", default="com.application.app"),
        FieldSpec(
            key="minimumApiLevel",
            message="Minimum required SDK:",
            kind=FieldKind.SINGLE,
            choices=SDK_VERSION_CHOICES,
            default=14,
        ),
        FieldSpec(
            key="targetSdk",
            message="Target SDK:",
            kind=FieldKind.SINGLE,
            choices=SDK_VERSION_CHOICES,
            default=19,
        ),
        FieldSpec(
            key="compileSdkVersion",
            message="Compile with:",
            kind=FieldKind.SINGLE,
            choices=SDK_VERSION_CHOICES,
            default=19,
        ),
        FieldSpec(
            key="javaLanguageLevel",
            message="Java language level:",
            kind=FieldKind.SINGLE,
            choices=JAVA_LEVEL_CHOICES,
            default="VERSION_1_7",
        ),
        FieldSpec(
            key="theme",
            message="Theme:",
            kind=FieldKind.SINGLE,
            choices=THEME_CHOICES,
            default=3,
        ),
        FieldSpec(
            key="supportLibraries",
            message="Support mode:",
            kind=FieldKind.MULTI,
            choices=tuple(
                Choice(label=toggle.label, value=toggle.identifier)
                for toggle in SUPPORT_LIBRARIES
            ),
            default=[t.identifier for t in SUPPORT_LIBRARIES if t.default_enabled],
        ),
    ]
    return AnswerSchema(fields, SUPPORT_LIBRARIES)


ANDROID_SCHEMA = _build_android_schema()
