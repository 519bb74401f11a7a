from pydantic import BaseModel, ConfigDict, Field, field_validator


class AnalyzeRequest(BaseModel):
    image: str = ""
    text: str = ""

    @field_validator("image", "text", mode="before")
    @classmethod
    def null_as_empty(cls, v):
        return "" if v is None else v


class VisualCues(BaseModel):
    model_config = ConfigDict(frozen=True)

    architectural_style: list[str]
    materials: list[str]
    structures: list[str]
    iconography: list[str]
    carvings: list[str]
    estimated_period: str
    estimated_dynasty: list[str]


class AgentAnalyses(BaseModel):
    architectural: str
    cultural: str
    verification: str


class RankedInterpretation(BaseModel):
    rank: int = Field(ge=1, le=5)
    hypothesis: str
    confidence: int = Field(ge=50, le=95)
    summary: str
    narrative: str


class NearbyHeritageSite(BaseModel):
    name: str
    location: str
    distance_km: float | None = None
    description: str
    why_visit: str
    period: str


class AnalysisResult(BaseModel):
    is_valid: bool
    is_heritage: bool
    error: str | None = None
    visual_analysis: str | None = None
    hypotheses: list[str] | None = None
    evidence: str | None = None
    agent_analyses: AgentAnalyses | None = None
    ranked_interpretations: list[RankedInterpretation] | None = None
    nearby_heritage_sites: list[NearbyHeritageSite] | None = None


class ProviderStatus(BaseModel):
    provider: str
    ready: bool
    message: str
