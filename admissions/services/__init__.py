from admissions.services.admission_service import AdmissionService

__all__ = ["AdmissionService"]
