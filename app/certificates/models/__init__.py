"""Certificate models."""

from app.certificates.models.certificate import Certificate, CertificateStatus

__all__ = ["Certificate", "CertificateStatus"]
