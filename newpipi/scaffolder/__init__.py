"""newpipi scaffolder -- materializes language project skeletons.

Quick usage::

    from newpipi.models import Language, ProjectRequest
    from newpipi.scaffolder import get_spec

    request = ProjectRequest(parent_path="/tmp", project_name="cx", language=Language.CPP)
    materializer = get_spec(request.language).materializer_cls(request)
    project_path = await materializer.materialize()
"""

from newpipi.scaffolder.materializers import Materializer, SetupStep
from newpipi.scaffolder.registry import LANGUAGES, LanguageSpec, get_spec
from newpipi.scaffolder.templates import TemplateRenderer

__all__ = [
    "LANGUAGES",
    "LanguageSpec",
    "Materializer",
    "SetupStep",
    "TemplateRenderer",
    "get_spec",
]
