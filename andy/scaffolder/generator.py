"""Main scaffolding orchestrator.

Wires the pipeline stages together: collect answers, derive the
``ResolvedConfig``, build the plan, and hand it to the writer.  Each stage
only sees the previous stage's output.
"""

from __future__ import annotations

import random
from collections.abc import Mapping
from pathlib import Path
from typing import Any

from andy.config import Config

from .collector import AnswerSet, InputProvider, RichInputProvider, collect
from .deriver import ResolvedConfig, derive
from .plan import OutputAction, build_plan
from .schema import ANDROID_SCHEMA, AnswerSchema
from .templates import TemplateRenderer
from .writer import ScaffoldWriter


class ProjectGenerator:
    """Runs one scaffold from prompts (or given answers) to files on disk.

    Typical use::

        generator = ProjectGenerator(Config(output_dir=Path("MyApp")))
        written = await generator.generate()
    """

    def __init__(
        self,
        config: Config | None = None,
        provider: InputProvider | None = None,
        schema: AnswerSchema = ANDROID_SCHEMA,
        *,
        rng: random.Random | None = None,
        verbose: bool = True,
    ) -> None:
        self.config = config or Config()
        self.provider = provider or RichInputProvider()
        self.schema = schema
        self.rng = rng
        self.verbose = verbose
        self.renderer = TemplateRenderer(self.config.resolved_template_dir)

    # -- Stages ------------------------------------------------------------

    def collect(self) -> AnswerSet:
        return collect(
            self.schema,
            self.provider,
            rng=self.rng,
            greet=self.config.show_greeting,
        )

    def resolve(self, answers: AnswerSet | Mapping[str, Any]) -> ResolvedConfig:
        if not isinstance(answers, AnswerSet):
            answers = AnswerSet.model_validate(dict(answers))
        return derive(answers, self.schema)

    def plan(self, resolved: ResolvedConfig) -> list[OutputAction]:
        return build_plan(resolved)

    # -- Public API --------------------------------------------------------

    async def generate(self) -> list[Path]:
        """Prompt for every answer, then write the project.

        Raises:
            InputAborted: The prompt session was interrupted; nothing was written.
            WriteFailure: Writing stopped partway; earlier files remain.
        """
        return await self.generate_from_answers(self.collect())

    async def generate_from_answers(
        self, answers: AnswerSet | Mapping[str, Any]
    ) -> list[Path]:
        """Write the project for already-collected *answers*.

        Returns:
            Every file written, in plan order.
        """
        resolved = self.resolve(answers)
        return await self.write(resolved)

    async def write(self, resolved: ResolvedConfig) -> list[Path]:
        writer = ScaffoldWriter(
            self.renderer,
            self.config.output_dir,
            resolved.template_context(),
            verbose=self.verbose,
        )
        return await writer.execute(self.plan(resolved))
