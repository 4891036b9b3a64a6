import logging
from uuid import UUID

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from app.certificates.models.certificate import Certificate
from app.certificates.schemas.certificate import CertificateCreate
from app.core.exceptions import ConflictError, NotFoundError, ValidationError
from app.core.repository import BaseRepository

logger = logging.getLogger(__name__)


class CertificateRepository(BaseRepository[Certificate]):
    def __init__(self, db: Session):
        super().__init__(db, Certificate)

    def find_by_number(self, cert_number: str) -> Certificate | None:
        return self.find_one_by(cert_number=cert_number)


class CertificateService:
    def __init__(self, db: Session):
        self.repository = CertificateRepository(db)

    def verify_by_number(self, cert_number: str) -> tuple[Certificate, bool]:
        """Look up a certificate by its public number.

        A certificate that is on file but Expired or Revoked is not an error:
        the record is returned with ``valid`` set to False.
        """
        number = cert_number.strip()
        if not number:
            raise ValidationError("Certificate number is required", field="cert_number")

        certificate = self.repository.find_by_number(number)
        if certificate is None:
            raise NotFoundError("Certificate not found or invalid", resource="certificate")

        return certificate, certificate.is_valid

    def list_certificates(self) -> list[Certificate]:
        return self.repository.list_newest_first()

    def get_certificate(self, certificate_id: UUID) -> Certificate:
        certificate = self.repository.get_by_id(certificate_id)
        if certificate is None:
            raise NotFoundError("Certificate not found", resource="certificate")
        return certificate

    def create_certificate(self, payload: CertificateCreate) -> Certificate:
        if self.repository.find_by_number(payload.cert_number) is not None:
            raise ConflictError("Certificate number already exists", resource="certificate")

        try:
            certificate = self.repository.create(**payload.model_dump())
        except IntegrityError as e:
            self.repository.db.rollback()
            raise ConflictError("Certificate number already exists", resource="certificate") from e

        logger.info("Issued certificate %s (%s)", certificate.cert_number, certificate.status.value)
        return certificate

    def delete_certificate(self, certificate_id: UUID) -> None:
        certificate = self.get_certificate(certificate_id)
        self.repository.delete(certificate)
        logger.info("Deleted certificate %s", certificate_id)
