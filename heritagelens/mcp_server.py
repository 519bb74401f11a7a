from fastmcp import FastMCP

from heritagelens.config import get_settings
from heritagelens.models.analysis import AnalyzeRequest
from heritagelens.services import analysis as analysis_service

mcp = FastMCP("HeritageLens")


@mcp.tool
def heritage_analyze(image: str, text: str = "") -> dict:
    """Analyze an Indian heritage image. Pass the image as a data URL
    (data:image/jpeg;base64,...) and optional context such as the place it was taken.
    Returns visual cues, hypotheses, evidence, three agent analyses and ranked interpretations.
    If is_heritage is false, the error field explains why the image was rejected."""
    settings = get_settings()
    provider = analysis_service.get_analysis_provider(settings.analysis_provider, settings)
    _, result = analysis_service.run_analysis(provider, AnalyzeRequest(image=image, text=text))
    return result.model_dump(exclude_none=True)
