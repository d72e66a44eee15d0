"""Language dispatch table.

Maps every :class:`~newpipi.models.Language` to a ``LanguageSpec`` record
holding the tools its precheck queries, the materializer class that builds it
and a rough size estimate.  Adding a language means adding one entry here.
"""

from __future__ import annotations

from dataclasses import dataclass

from newpipi.models import Language
from newpipi.scaffolder.materializers import (
    CppMaterializer,
    CSharpMaterializer,
    GoMaterializer,
    JavaMaterializer,
    JavaScriptMaterializer,
    Materializer,
    PythonMaterializer,
    RustMaterializer,
    TypeScriptMaterializer,
)


@dataclass(frozen=True)
class LanguageSpec:
    """Everything the pipeline needs to know about one language."""

    language: Language
    tools: tuple[str, ...]
    materializer_cls: type[Materializer]
    size_estimate_mb: int


LANGUAGES: dict[Language, LanguageSpec] = {
    spec.language: spec
    for spec in (
        LanguageSpec(Language.PYTHON, ("python3",), PythonMaterializer, 50),
        LanguageSpec(Language.GO, ("go",), GoMaterializer, 30),
        LanguageSpec(Language.RUST, ("rustc", "cargo"), RustMaterializer, 100),
        LanguageSpec(Language.JAVASCRIPT, ("node", "npm"), JavaScriptMaterializer, 40),
        LanguageSpec(Language.TYPESCRIPT, ("node", "npm"), TypeScriptMaterializer, 60),
        LanguageSpec(Language.CPP, ("g++", "cmake"), CppMaterializer, 1),
        LanguageSpec(Language.CSHARP, ("dotnet",), CSharpMaterializer, 5),
        LanguageSpec(Language.JAVA, ("javac",), JavaMaterializer, 1),
    )
}


def get_spec(language: Language) -> LanguageSpec:
    """Look up the dispatch record for *language*."""
    return LANGUAGES[Language(language)]
