from compliance.models.obligation import ObligationModel
from compliance.models.alert import AlertModel
from compliance.models.document import DocumentModel

__all__ = ["ObligationModel", "AlertModel", "DocumentModel"]
