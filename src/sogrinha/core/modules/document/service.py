from datetime import date

import structlog

from sogrinha.core.modules.document.content import build_contract_content
from sogrinha.core.modules.document.docx_renderer import render_contract_docx
from sogrinha.core.modules.document.models import ContractDocumentData, DocumentFormat, RenderedDocument
from sogrinha.core.modules.document.pdf_renderer import render_contract_pdf

logger = structlog.get_logger(__name__)


def document_filename(identifier: str, document_format: DocumentFormat) -> str:
    """File name offered for download, e.g. ``contrato_ALG19102026042.pdf``."""
    safe_identifier = identifier.lstrip("#").replace("/", "_") or "sem_numero"
    return f"contrato_{safe_identifier}.{document_format.value}"


def generate_contract_document(
    data: ContractDocumentData, document_format: DocumentFormat, today: date
) -> RenderedDocument:
    """Fill the contract template and render it.

    Raises:
        MissingRequiredDataError: If the contract has no owner record (nothing is rendered)
        ValidationError: If the contract kind has no template
    """
    content = build_contract_content(data, today)

    if document_format is DocumentFormat.PDF:
        payload = render_contract_pdf(content)
    else:
        payload = render_contract_docx(content)

    filename = document_filename(data.contract.identifier, document_format)
    logger.debug("contract_document_rendered", contract_id=data.contract.id, filename=filename, size=len(payload))
    return RenderedDocument(filename=filename, media_type=document_format.media_type, content=payload)
