from uuid import UUID

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from app.auth.dependencies import get_current_principal
from app.auth.schemas.auth import Principal
from app.certificates.schemas.certificate import (
    CertificateCreate,
    CertificateResponse,
    CertificateVerifyResponse,
)
from app.certificates.services.certificate_service import CertificateService
from app.core.schemas import (
    ApiResponse,
    ListResponse,
    MessageResponse,
    list_response,
    success_response,
)
from app.db.session import get_db

router = APIRouter()


def get_certificate_service(db: Session = Depends(get_db)) -> CertificateService:
    return CertificateService(db)


@router.get("/verify/{number:path}", response_model=CertificateVerifyResponse)
async def verify_certificate(
    number: str,
    service: CertificateService = Depends(get_certificate_service),
) -> CertificateVerifyResponse:
    """Verify a certificate by its number (public endpoint).

    Numbers may contain "/", so the whole remaining path is the number.
    """
    certificate, valid = service.verify_by_number(number)

    return CertificateVerifyResponse(
        data=CertificateResponse.model_validate(certificate),
        valid=valid,
        message=(
            "Certificate verified successfully"
            if valid
            else "Certificate found but status is not valid"
        ),
    )


@router.get("", response_model=ListResponse[CertificateResponse])
async def list_certificates(
    service: CertificateService = Depends(get_certificate_service),
    principal: Principal = Depends(get_current_principal),
) -> ListResponse[CertificateResponse]:
    certificates = service.list_certificates()
    return list_response([CertificateResponse.model_validate(c) for c in certificates])


@router.get("/{certificate_id}", response_model=ApiResponse[CertificateResponse])
async def get_certificate(
    certificate_id: UUID,
    service: CertificateService = Depends(get_certificate_service),
    principal: Principal = Depends(get_current_principal),
) -> ApiResponse[CertificateResponse]:
    certificate = service.get_certificate(certificate_id)
    return success_response(CertificateResponse.model_validate(certificate))


@router.post(
    "",
    response_model=ApiResponse[CertificateResponse],
    status_code=status.HTTP_201_CREATED,
)
async def create_certificate(
    payload: CertificateCreate,
    service: CertificateService = Depends(get_certificate_service),
    principal: Principal = Depends(get_current_principal),
) -> ApiResponse[CertificateResponse]:
    certificate = service.create_certificate(payload)
    return success_response(
        CertificateResponse.model_validate(certificate),
        message="Certificate created successfully",
    )


@router.delete("/{certificate_id}", response_model=MessageResponse)
async def delete_certificate(
    certificate_id: UUID,
    service: CertificateService = Depends(get_certificate_service),
    principal: Principal = Depends(get_current_principal),
) -> MessageResponse:
    service.delete_certificate(certificate_id)
    return MessageResponse(message="Certificate deleted successfully")
