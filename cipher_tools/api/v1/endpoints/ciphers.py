from fastapi import APIRouter

from cipher_tools.dependencies import RegistryDep
from cipher_tools.models.schemas import CipherInfo, CipherListResponse

router = APIRouter()


@router.get(
    "",
    response_model=CipherListResponse,
    summary="List ciphers",
    description="List the registered cipher types.",
)
async def list_ciphers(registry: RegistryDep) -> CipherListResponse:
    """List registered cipher engines."""
    return CipherListResponse(
        ciphers=[
            CipherInfo(
                cipher_type=engine.cipher_type,
                name=engine.name,
                description=engine.description,
                uses_padding=engine.uses_padding,
            )
            for engine in registry.get_all_engines()
        ]
    )
