import logging

from fastapi import APIRouter, HTTPException, status

from cipher_tools.core.exceptions import CipherToolsError, EngineNotFoundError, TextTooLongError
from cipher_tools.dependencies import RegistryDep, SettingsDep
from cipher_tools.models.schemas import DecryptRequest, DecryptResponse, ErrorResponse
from cipher_tools.services.encoding import decode_text, to_hex
from cipher_tools.services.padding.pkcs7 import MAX_BLOCK_LENGTH

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post(
    "",
    response_model=DecryptResponse,
    responses={
        400: {"model": ErrorResponse, "description": "Invalid input"},
        404: {"model": ErrorResponse, "description": "Cipher type not supported"},
        500: {"model": ErrorResponse, "description": "Decryption failed"},
    },
    summary="Decrypt ciphertext",
    description="Decrypt ciphertext using a specified cipher type and key.",
)
async def decrypt_ciphertext(
    request: DecryptRequest,
    settings: SettingsDep,
    registry: RegistryDep,
) -> DecryptResponse:
    """
    Decrypt ciphertext with a known key.

    The recovered bytes are always returned as hex; they are also returned
    as text when they form valid UTF-8.
    """
    try:
        engine = registry.get_engine(request.cipher_type, request.padding)
    except EngineNotFoundError as e:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=e.message,
        )

    try:
        ciphertext = decode_text(request.ciphertext, request.encoding)
        # Padding may add up to one block on top of the plaintext limit
        max_length = settings.max_text_length + MAX_BLOCK_LENGTH
        if len(ciphertext) > max_length:
            raise TextTooLongError(len(ciphertext), max_length)

        plaintext = engine.decrypt(ciphertext, request.key.encode("utf-8"))

        try:
            text = plaintext.decode("utf-8")
        except UnicodeDecodeError:
            text = None

        return DecryptResponse(
            plaintext=text,
            plaintext_hex=to_hex(plaintext),
            cipher_type=request.cipher_type,
        )

    except CipherToolsError as e:
        logger.warning("Decryption rejected: %s", e.message)
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=e.message,
        )
    except Exception as e:
        logger.exception("Decryption failed")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=f"Decryption failed: {str(e)}",
        )
