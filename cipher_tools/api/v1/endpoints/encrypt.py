import logging

from fastapi import APIRouter, HTTPException, status

from cipher_tools.core.exceptions import CipherToolsError, EngineNotFoundError, TextTooLongError
from cipher_tools.dependencies import RegistryDep, SettingsDep
from cipher_tools.models.schemas import EncryptRequest, EncryptResponse, ErrorResponse
from cipher_tools.services.encoding import encode_text

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post(
    "",
    response_model=EncryptResponse,
    responses={
        400: {"model": ErrorResponse, "description": "Invalid input"},
        404: {"model": ErrorResponse, "description": "Cipher type not supported"},
    },
    summary="Encrypt plaintext",
    description="Encrypt plaintext using a specified cipher type and key.",
)
async def encrypt_plaintext(
    request: EncryptRequest,
    settings: SettingsDep,
    registry: RegistryDep,
) -> EncryptResponse:
    """
    Encrypt plaintext with a specified cipher type.

    Plaintext and key are taken as UTF-8. If no key is provided a random
    one is generated and returned in the response.
    """
    try:
        engine = registry.get_engine(request.cipher_type, request.padding)
    except EngineNotFoundError as e:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=e.message,
        )

    try:
        plaintext = request.plaintext.encode("utf-8")
        if len(plaintext) > settings.max_text_length:
            raise TextTooLongError(len(plaintext), settings.max_text_length)

        # Generate key if not provided
        if request.key is None:
            key = engine.generate_random_key()
        else:
            key = request.key.encode("utf-8")

        ciphertext = engine.encrypt(plaintext, key)

        return EncryptResponse(
            ciphertext=encode_text(ciphertext, request.encoding),
            cipher_type=request.cipher_type,
            key_used=key.decode("utf-8"),
            encoding=request.encoding,
        )

    except CipherToolsError as e:
        logger.warning("Encryption rejected: %s", e.message)
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=e.message,
        )
    except Exception as e:
        logger.exception("Encryption failed")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=f"Encryption failed: {str(e)}",
        )
