from rolodex.services.exports.csv_export import CSV_HEADER, persons_csv
from rolodex.services.exports.excel_export import ExcelColumnSet, persons_excel
from rolodex.services.exports.pdf_export import PDF_HEADER, persons_pdf

__all__ = [
    "CSV_HEADER",
    "persons_csv",
    "ExcelColumnSet",
    "persons_excel",
    "PDF_HEADER",
    "persons_pdf",
]
