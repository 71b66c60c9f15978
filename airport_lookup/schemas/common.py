from pydantic import BaseModel
from typing import List


class ErrorResponse(BaseModel):
    """Error body returned by the lookup endpoint"""

    error: str


class SheetImportResponse(BaseModel):
    """Import result for a single sheet"""

    sheet: str
    total_records: int = 0
    records_inserted: int = 0
    records_skipped_error: int = 0
    errors: List[str] = []

    @property
    def success_rate(self) -> float:
        """Calculate success rate"""
        if self.total_records == 0:
            return 0.0
        return (self.records_inserted / self.total_records) * 100


class WorkbookImportResponse(BaseModel):
    """Import result for a whole workbook"""

    filename: str
    sheets: List[SheetImportResponse] = []

    @property
    def records_inserted(self) -> int:
        return sum(sheet.records_inserted for sheet in self.sheets)

    @property
    def errors(self) -> List[str]:
        return [
            f"{sheet.sheet}: {error}" for sheet in self.sheets for error in sheet.errors
        ]
