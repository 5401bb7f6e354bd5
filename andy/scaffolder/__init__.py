"""Andy scaffolder -- generates Android application project skeletons.

The pipeline runs in five stages, each consuming only the previous stage's
output::

    AnswerSchema -> collect() -> derive() -> build_plan() -> ScaffoldWriter

Quick usage::

    from andy.scaffolder import ProjectGenerator

    generator = ProjectGenerator()
    written = await generator.generate_from_answers({
        "applicationName": "My Application",
        "moduleName": "mobile",
        "packageName": "com.application.app",
        "minimumApiLevel": 14,
        "targetSdk": 19,
        "compileSdkVersion": 19,
        "javaLanguageLevel": "VERSION_1_7",
        "theme": 3,
        "supportLibraries": ["appCompat"],
    })
"""

from andy.scaffolder.collector import (
    AnswerSet,
    InputAborted,
    RichInputProvider,
    StaticInputProvider,
    collect,
)
from andy.scaffolder.deriver import ResolvedConfig, SupportLibraries, derive
from andy.scaffolder.generator import ProjectGenerator
from andy.scaffolder.plan import (
    CopyDirectoryTree,
    CopyVerbatim,
    MakeDirectory,
    OutputAction,
    RenderTemplate,
    build_plan,
)
from andy.scaffolder.schema import (
    ANDROID_SCHEMA,
    AnswerSchema,
    FieldKind,
    FieldSpec,
    InvalidFieldSpec,
    ModuleToggle,
)
from andy.scaffolder.templates import TemplateRenderer
from andy.scaffolder.writer import ScaffoldWriter, WriteFailure

__all__ = [
    "ANDROID_SCHEMA",
    "AnswerSchema",
    "AnswerSet",
    "CopyDirectoryTree",
    "CopyVerbatim",
    "FieldKind",
    "FieldSpec",
    "InputAborted",
    "InvalidFieldSpec",
    "MakeDirectory",
    "ModuleToggle",
    "OutputAction",
    "ProjectGenerator",
    "RenderTemplate",
    "ResolvedConfig",
    "RichInputProvider",
    "ScaffoldWriter",
    "StaticInputProvider",
    "SupportLibraries",
    "TemplateRenderer",
    "WriteFailure",
    "build_plan",
    "collect",
    "derive",
]
