"""Answer collection: run an ``AnswerSchema`` against an input provider.

The collector owns the prompt session.  It shows one greeting, asks every
field in schema order, and either returns a complete, frozen ``AnswerSet`` or
raises ``InputAborted``; there is no partially-answered state.

Two providers ship with the package:

* ``RichInputProvider`` -- interactive terminal prompts built on
  ``rich.prompt``.
* ``StaticInputProvider`` -- answers from a pre-filled mapping (an answers
  file, or a test), falling back to each field's default.
"""

from __future__ import annotations

import random
from collections.abc import Mapping
from typing import Any, Protocol

from pydantic import BaseModel, ConfigDict, Field
from rich.prompt import Prompt

from andy.utils import console, print_greeting

from .schema import AnswerSchema, FieldKind, FieldSpec

GREETINGS: tuple[str, ...] = (
    "Yo! Android generator to the rescue! Take for some relax and enjoy life :D!",
    "OK Andy! Generate this app!",
    "Yo! Support this piece of art! http://bit.ly/1fLq5M2",
    "Andy… what are you doing? Please come back! http://bit.ly/1uZboLb",
)


class InputAborted(Exception):
    """Raised when the prompt session ends before every field is answered."""

    def __init__(self, key: str | None = None, reason: str = "") -> None:
        self.key = key
        where = f" at '{key}'" if key else ""
        detail = f": {reason}" if reason else ""
        super().__init__(f"Prompt session aborted{where}{detail}")


# ---------------------------------------------------------------------------
# Answer set
# ---------------------------------------------------------------------------


class AnswerSet(BaseModel):
    """Raw answers of one prompt session, keyed by ``FieldSpec.key``.

    Field aliases are the schema keys, so ``AnswerSet.model_validate`` accepts
    the dict the collector builds (or an answers file) as-is.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    application_name: str = Field(alias="applicationName")
    module_name: str = Field(alias="moduleName")
    package_name: str = Field(alias="packageName")
    minimum_api_level: int = Field(alias="minimumApiLevel")
    target_sdk: int = Field(alias="targetSdk")
    compile_sdk_version: int = Field(alias="compileSdkVersion")
    java_language_level: str = Field(alias="javaLanguageLevel")
    theme: int = Field(alias="theme")
    support_libraries: tuple[str, ...] | None = Field(default=None, alias="supportLibraries")


# ---------------------------------------------------------------------------
# Input providers
# ---------------------------------------------------------------------------


class InputProvider(Protocol):
    def greet(self, message: str) -> None: ...

    def ask(self, field: FieldSpec) -> Any: ...


class RichInputProvider:
    """Interactive terminal prompts.

    Single-choice fields show a numbered list and accept one number;
    multi-choice fields accept a comma-separated list of numbers (empty for
    none).  Out-of-range input is rejected and the question is asked again,
    so every returned value is one of the field's choices.
    """

    def greet(self, message: str) -> None:
        print_greeting(message)

    def ask(self, field: FieldSpec) -> Any:
        if field.kind is FieldKind.TEXT:
            return Prompt.ask(field.message, default=field.default, console=console)
        self._print_choices(field)
        if field.kind is FieldKind.SINGLE:
            return self._ask_single(field)
        return self._ask_multi(field)

    def _print_choices(self, field: FieldSpec) -> None:
        console.print(f"[bold]{field.message}[/bold]")
        for number, choice in enumerate(field.choices or (), start=1):
            console.print(f"  [cyan]{number:>2}[/cyan]) {choice.label}", highlight=False)

    def _ask_single(self, field: FieldSpec) -> Any:
        values = field.values()
        numbers = [str(n) for n in range(1, len(values) + 1)]
        default = str(values.index(field.default) + 1)
        answer = Prompt.ask(
            "Choose one",
            choices=numbers,
            default=default,
            show_choices=False,
            console=console,
        )
        return values[int(answer) - 1]

    def _ask_multi(self, field: FieldSpec) -> list[Any]:
        values = field.values()
        default = ",".join(str(values.index(v) + 1) for v in field.default or ())
        while True:
            raw = Prompt.ask(
                "Choose any (comma separated, empty for none)",
                default=default,
                show_default=bool(default),
                console=console,
            )
            picked = _parse_selection(raw, len(values))
            if picked is not None:
                return [values[i] for i in picked]
            console.print(f"[prompt.invalid]Enter numbers between 1 and {len(values)}")


class StaticInputProvider:
    """Answers from a mapping; unanswered fields take their schema default.

    When *schema* is given, every key of *answers* must name one of its
    fields, otherwise ``ValueError`` is raised.
    """

    def __init__(
        self,
        answers: Mapping[str, Any] | None = None,
        quiet: bool = True,
        *,
        schema: AnswerSchema | None = None,
    ) -> None:
        self.answers = dict(answers or {})
        if schema is not None:
            known = {field.key for field in schema}
            unknown = sorted(key for key in self.answers if key not in known)
            if unknown:
                raise ValueError(f"unknown answer keys: {', '.join(unknown)}")
        self.quiet = quiet
        self.greetings: list[str] = []

    def greet(self, message: str) -> None:
        self.greetings.append(message)
        if not self.quiet:
            print_greeting(message)

    def ask(self, field: FieldSpec) -> Any:
        if field.key in self.answers:
            return self.answers[field.key]
        if field.kind is FieldKind.MULTI:
            return list(field.default or ())
        return field.default


# ---------------------------------------------------------------------------
# Collection
# ---------------------------------------------------------------------------


def random_greeting(rng: random.Random | None = None) -> str:
    """Pick one entry of ``GREETINGS``."""
    return (rng or random).choice(GREETINGS)


def collect(
    schema: AnswerSchema,
    provider: InputProvider,
    *,
    rng: random.Random | None = None,
    greet: bool = True,
) -> AnswerSet:
    """Ask every field of *schema* through *provider* and freeze the result.

    Args:
        schema: Field declarations, asked in order.
        provider: Where the answers come from.
        rng: Random source for the greeting (tests pass a seeded one).
        greet: Whether to show the greeting before the first prompt.

    Returns:
        The complete ``AnswerSet``.

    Raises:
        InputAborted: If the provider is interrupted (``KeyboardInterrupt``,
            ``EOFError``) or raises ``InputAborted`` itself.
    """
    if greet:
        provider.greet(random_greeting(rng))

    raw: dict[str, Any] = {}
    for field in schema:
        try:
            raw[field.key] = provider.ask(field)
        except InputAborted:
            raise
        except (KeyboardInterrupt, EOFError) as exc:
            raise InputAborted(field.key, type(exc).__name__) from exc
    return AnswerSet.model_validate(raw)


def _parse_selection(raw: str, count: int) -> list[int] | None:
    """Parse ``"1, 3"`` into zero-based indices; ``None`` when malformed."""
    picked: list[int] = []
    for part in raw.split(","):
        part = part.strip()
        if not part:
            continue
        if not part.isdigit() or not 1 <= int(part) <= count:
            return None
        index = int(part) - 1
        if index not in picked:
            picked.append(index)
    return picked
