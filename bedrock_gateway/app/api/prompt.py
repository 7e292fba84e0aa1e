from fastapi import APIRouter, Depends, HTTPException, Request, status
from pydantic import ValidationError
from starlette.concurrency import run_in_threadpool
from bedrock_shared.schemas.prompt import PromptRequest, PromptResponse
from bedrock_gateway.app.core.bedrock import InferenceClient
import logging

logger = logging.getLogger(__name__)
router = APIRouter()

INVALID_PAYLOAD = "Invalid request payload"
PROMPT_AND_MODEL_REQUIRED = "Prompt and model are required"
INVOCATION_FAILED = "Failed to invoke Bedrock model"


def get_inference_client(request: Request) -> InferenceClient:
    return request.app.state.inference_client


async def parse_prompt_request(request: Request) -> PromptRequest:
    """Decode the body as JSON regardless of the declared Content-Type."""
    body = await request.body()
    try:
        return PromptRequest.model_validate_json(body)
    except ValidationError as e:
        logger.warning(f"Rejected payload on {request.url.path}: {e.errors()}")
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=INVALID_PAYLOAD,
        )


@router.post("/api/send-prompt", response_model=PromptResponse)
async def send_prompt(
    http_request: Request,
    payload: PromptRequest = Depends(parse_prompt_request),
    client: InferenceClient = Depends(get_inference_client),
) -> PromptResponse:
    if not payload.prompt or not payload.model:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=PROMPT_AND_MODEL_REQUIRED,
        )

    logger.info(
        f"Invoking model {payload.model}: prompt_length={len(payload.prompt)}"
    )
    try:
        # boto3 is blocking; keep it off the event loop.
        text = await run_in_threadpool(client.invoke, payload.prompt, payload.model)
    except Exception as e:
        logger.error(f"Error invoking Bedrock model: {e}", exc_info=True)
        http_request.app.state.metrics.record_inference_failure()
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=INVOCATION_FAILED,
        )

    logger.info(f"Model {payload.model} responded: response_length={len(text)}")
    return PromptResponse(response=text)
