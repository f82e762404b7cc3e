"""Request models for the API."""

from pydantic import BaseModel, Field


class ScriptRequest(BaseModel):
    """Request carrying a slide script.

    Attributes:
        script: Plain-text script, one keyword line per row
    """

    script: str = Field(
        ...,
        description="Slide script text (Diapositiva/Slide N, Título/Title:, Contenido/Content:, ...)",
        min_length=1,
    )

    class Config:
        """Pydantic model configuration."""

        json_schema_extra = {
            "example": {
                "script": (
                    "Diapositiva 1\n"
                    "Título: Quarterly review\n"
                    "Contenido: Highlights; Next steps\n"
                    "\n"
                    "Diapositiva 2\n"
                    "Título: Usage\n"
                    "Datos: Labels: Summaries, Ideas, Drafting; Valores: 4.2, 3.8, 2.5\n"
                    "Descripción: Usage by activity"
                )
            }
        }
