from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from heritagelens.config import get_settings
from heritagelens.models.analysis import AnalysisResult, AnalyzeRequest, ProviderStatus
from heritagelens.services import analysis as analysis_service

router = APIRouter(prefix="/api", tags=["analysis"])


def get_provider() -> analysis_service.AnalysisProvider:
    settings = get_settings()
    return analysis_service.get_analysis_provider(settings.analysis_provider, settings)


@router.post("/analyze", response_model=AnalysisResult, response_model_exclude_none=True)
def analyze(
    req: AnalyzeRequest,
    provider: analysis_service.AnalysisProvider = Depends(get_provider),
) -> JSONResponse:
    status_code, result = analysis_service.run_analysis(provider, req)
    return JSONResponse(status_code=status_code, content=result.model_dump(exclude_none=True))


@router.get("/status")
def status(provider: analysis_service.AnalysisProvider = Depends(get_provider)) -> ProviderStatus:
    return provider.status()


@router.get("/ping")
def ping() -> dict:
    return {"message": get_settings().ping_message}
