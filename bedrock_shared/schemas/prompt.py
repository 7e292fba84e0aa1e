from pydantic import BaseModel, Field, ConfigDict


class PromptRequest(BaseModel):
    model_config = ConfigDict(strict=True)

    # Absent fields decode as empty and are rejected by the handler.
    prompt: str = Field(default="", description="Prompt text sent to the model")
    model: str = Field(default="", description="Bedrock model identifier")


class PromptResponse(BaseModel):
    response: str = Field(..., description="Text generated by the model")
