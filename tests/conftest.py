"""Shared pytest fixtures for the Andy test suite.

Provides reusable fixtures for:
- Raw answer dicts (the defaults every prompt would accept)
- Frozen ``AnswerSet`` / ``ResolvedConfig`` built from them
- A quiet ``ProjectGenerator`` writing into a temporary directory
"""

from __future__ import annotations

import random
from pathlib import Path
from typing import Any

import pytest

from andy.config import Config
from andy.scaffolder.collector import AnswerSet, StaticInputProvider
from andy.scaffolder.deriver import ResolvedConfig, derive
from andy.scaffolder.generator import ProjectGenerator


# ---------------------------------------------------------------------------
# Answers
# ---------------------------------------------------------------------------

@pytest.fixture
def default_answers() -> dict[str, Any]:
    """Answers keyed by prompt key, as the collector would build them."""
    return {
        "applicationName": "My Application",
        "moduleName": "mobile",
        "packageName": "com.application.app",
        "minimumApiLevel": 13,
        "targetSdk": 18,
        "compileSdkVersion": 18,
        "javaLanguageLevel": "VERSION_1_7",
        "theme": 3,
        "supportLibraries": [],
    }


@pytest.fixture
def answer_set(default_answers: dict[str, Any]) -> AnswerSet:
    return AnswerSet.model_validate(default_answers)


@pytest.fixture
def resolved(answer_set: AnswerSet) -> ResolvedConfig:
    return derive(answer_set)


@pytest.fixture
def resolved_with_libraries(default_answers: dict[str, Any]) -> ResolvedConfig:
    answers = {**default_answers, "supportLibraries": ["appCompat", "playServices"]}
    return derive(AnswerSet.model_validate(answers))


# ---------------------------------------------------------------------------
# Generator
# ---------------------------------------------------------------------------

@pytest.fixture
def tmp_project_dir(tmp_path: Path) -> Path:
    """Output root for generated projects (auto-cleanup)."""
    return tmp_path / "MyApplication"


@pytest.fixture
def generator(tmp_project_dir: Path, default_answers: dict[str, Any]) -> ProjectGenerator:
    """Non-interactive generator answering with ``default_answers``."""
    return ProjectGenerator(
        Config(output_dir=tmp_project_dir),
        StaticInputProvider(default_answers),
        rng=random.Random(7),
        verbose=False,
    )
