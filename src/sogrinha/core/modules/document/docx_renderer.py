"""Word (.docx) rendering of contract documents."""

from io import BytesIO

from docx import Document
from docx.enum.text import WD_ALIGN_PARAGRAPH
from docx.shared import Pt

from sogrinha.core.modules.document.models import ContractContent


def render_contract_docx(content: ContractContent) -> bytes:
    document = Document()

    date_paragraph = document.add_paragraph(content.date_line)
    date_paragraph.alignment = WD_ALIGN_PARAGRAPH.RIGHT

    heading = document.add_heading(content.title, level=1)
    heading.alignment = WD_ALIGN_PARAGRAPH.CENTER
    document.add_paragraph(content.number)

    for section in content.sections:
        document.add_heading(section.title, level=2)
        for text in section.paragraphs:
            paragraph = document.add_paragraph()
            paragraph.alignment = WD_ALIGN_PARAGRAPH.JUSTIFY
            paragraph.add_run(text).font.size = Pt(12)

    place = document.add_paragraph(content.place_and_date)
    place.alignment = WD_ALIGN_PARAGRAPH.CENTER

    table = document.add_table(rows=3, cols=len(content.signatures))
    for column, signature in enumerate(content.signatures):
        table.cell(0, column).text = "______________________"
        table.cell(1, column).text = signature.name
        table.cell(2, column).text = signature.role
        for row in range(3):
            for paragraph in table.cell(row, column).paragraphs:
                paragraph.alignment = WD_ALIGN_PARAGRAPH.CENTER

    footer = document.sections[0].footer.paragraphs[0]
    footer.text = content.footer
    footer.alignment = WD_ALIGN_PARAGRAPH.CENTER

    buffer = BytesIO()
    document.save(buffer)
    return buffer.getvalue()
