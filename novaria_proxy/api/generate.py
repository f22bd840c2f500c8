import logging
import uuid

from fastapi import APIRouter, Depends, Request
import orjson

from ..core.config import GENERATE_PATH, MODELS_PATH, VALIDATION_ERROR_MESSAGE
from ..core.gemini_client import GeminiChatClient, get_gemini_client
from ..models.api_models import (
    ErrorResponseModel,
    GenerateRequestModel,
    GenerateResponseModel,
    ModelInfoPy,
    ModelListResponseModel,
)
from ..models.model_registry import DEFAULT_MODEL_KEY, MODEL_REGISTRY
from ..services.error_handling import describe_upstream_error
from ..services.requests import build_prompt_parts, convert_history_to_gemini_contents
from ..utils.helpers import error_response

logger = logging.getLogger("NovariaProxy.Routers.Generate")
router = APIRouter()


@router.post(
    GENERATE_PATH,
    response_model=GenerateResponseModel,
    responses={400: {"model": ErrorResponseModel}, 405: {"model": ErrorResponseModel}, 500: {"model": ErrorResponseModel}},
    summary="Gemini chat completion proxy",
    tags=["AI Proxy"],
)
async def generate_entrypoint(
    fastapi_request_obj: Request,
    gemini_client: GeminiChatClient = Depends(get_gemini_client),
):
    request_id = str(uuid.uuid4())
    log_prefix = f"RID-{request_id}"

    try:
        raw_body = await fastapi_request_obj.body()
        generate_input = GenerateRequestModel.model_validate(orjson.loads(raw_body or b"{}"))
    except (orjson.JSONDecodeError, TypeError, ValueError) as e:
        logger.error(f"{log_prefix}: Failed to parse or validate generate request JSON: {e}")
        return error_response(400, f"Invalid request data: {e}", request_id)

    if not generate_input.has_content():
        return error_response(400, VALIDATION_ERROR_MESSAGE, request_id)

    model_entry = MODEL_REGISTRY.resolve(generate_input.selected_model)
    if generate_input.selected_model not in MODEL_REGISTRY:
        logger.info(f"{log_prefix}: Unknown model '{generate_input.selected_model}', falling back to '{DEFAULT_MODEL_KEY}'.")
    logger.info(
        f"{log_prefix}: Received /generate request. model='{generate_input.selected_model}' -> "
        f"'{model_entry.upstream_model}', history={len(generate_input.conversation_history)}, "
        f"files={len(generate_input.attached_files)}"
    )

    try:
        history = convert_history_to_gemini_contents(generate_input.conversation_history, request_id)
        parts = build_prompt_parts(
            model_entry,
            generate_input.attached_files,
            generate_input.user_message,
            request_id,
        )
        response_text = await gemini_client.send_chat_message(model_entry, history, parts)
    except Exception as e:
        error_kind, error_message = describe_upstream_error(e)
        logger.error(f"{log_prefix}: Upstream call failed ({error_kind.value}): {type(e).__name__} - {e}", exc_info=True)
        return error_response(500, error_message, request_id)

    logger.info(f"{log_prefix}: Upstream replied with {len(response_text)} chars.")
    return GenerateResponseModel(
        text=response_text,
        image_url=None,
        model_used=generate_input.selected_model,
    )


@router.get(MODELS_PATH, response_model=ModelListResponseModel, summary="Available models", tags=["AI Proxy"])
async def list_models():
    """Expose the model table so the front-end picker can stay in sync with it."""
    return ModelListResponseModel(
        models=[
            ModelInfoPy(
                key=entry.key,
                upstream_model=entry.upstream_model,
                supports_attachments=entry.supports_inline_attachments,
            )
            for entry in MODEL_REGISTRY
        ],
        default=DEFAULT_MODEL_KEY,
    )
