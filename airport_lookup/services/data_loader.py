import logging
import pandas as pd
from pathlib import Path
from typing import Any, Dict
from pydantic import ValidationError
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session

from airport_lookup.database import Database
from airport_lookup.models import Airport, City, Country
from airport_lookup.schemas.common import SheetImportResponse, WorkbookImportResponse
from airport_lookup.schemas.rows import AirportRow, CityRow, CountryRow

logger = logging.getLogger(__name__)

# Load order follows the foreign keys
SHEETS = {
    "Country": (CountryRow, Country),
    "City": (CityRow, City),
    "Airport": (AirportRow, Airport),
}


class WorkbookError(Exception):
    """The workbook or one of its sheets could not be read"""


def _sheet_rows(df: pd.DataFrame) -> Dict[int, Dict[str, Any]]:
    """
    Turn a sheet into {spreadsheet row number: column -> value}, blanks as None.
    Fully blank rows are dropped.
    """
    df.columns = [str(column).strip() for column in df.columns]
    # Header is spreadsheet row 1
    df.index = df.index + 2
    df = df.dropna(how="all")
    df = df.astype(object).where(pd.notna(df), None)
    return {int(row_number): row for row_number, row in df.to_dict(orient="index").items()}


def _describe(error: ValidationError) -> str:
    return "; ".join(
        f"{'.'.join(str(part) for part in err['loc'])}: {err['msg']}"
        for err in error.errors()
    )


class WorkbookLoader:
    """Service for loading the reference tables from a spreadsheet"""

    def __init__(self, db: Session):
        self.db = db

    def load_workbook(self, file_path: str, reset: bool = False) -> WorkbookImportResponse:
        """
        Load the Country, City and Airport sheets, in that order.
        Each sheet is inserted as its own batch; a failing sheet does not
        undo the others.
        """
        sheets = self._read_workbook(file_path)

        if reset:
            self.clear_tables()

        response = WorkbookImportResponse(filename=Path(file_path).name)
        for sheet_name in SHEETS:
            result = self.load_sheet(sheet_name, sheets[sheet_name])
            response.sheets.append(result)

            logger.info(
                f"{sheet_name}: {result.records_inserted}/{result.total_records} inserted, "
                f"{result.records_skipped_error} skipped"
            )
            for error in result.errors[:10]:
                logger.warning(f"{sheet_name}: {error}")
            if len(result.errors) > 10:
                logger.warning(f"{sheet_name}: ... and {len(result.errors) - 10} more errors")

        return response

    def load_sheet(self, sheet_name: str, rows: Dict[int, Dict[str, Any]]) -> SheetImportResponse:
        """Validate every row, then bulk insert the valid ones"""
        row_schema, model = SHEETS[sheet_name]
        result = SheetImportResponse(sheet=sheet_name, total_records=len(rows))

        records = []
        for row_number, row in rows.items():
            try:
                record = row_schema.model_validate(row)
            except ValidationError as e:
                result.records_skipped_error += 1
                result.errors.append(f"Row {row_number}: {_describe(e)}")
                continue
            # Unset cells fall back to column defaults
            records.append(model(**record.model_dump(exclude_none=True)))

        if not records:
            return result

        try:
            self.db.add_all(records)
            self.db.commit()
            result.records_inserted = len(records)

        except IntegrityError as e:
            self.db.rollback()
            result.records_skipped_error += len(records)
            result.errors.append(f"Database constraint violation: {e.orig}")

        except SQLAlchemyError as e:
            self.db.rollback()
            result.records_skipped_error += len(records)
            result.errors.append(f"Database error: {e}")

        return result

    def clear_tables(self):
        """Delete all reference rows, dependents first"""
        for model in (Airport, City, Country):
            self.db.query(model).delete()
        self.db.commit()

    def _read_workbook(self, file_path: str) -> Dict[str, Dict[int, Dict[str, Any]]]:
        if not Path(file_path).is_file():
            raise WorkbookError(f"Data file not found: {file_path}")

        try:
            # Only empty cells are null; text such as "NA" (Namibia) is kept
            frames = pd.read_excel(
                file_path,
                sheet_name=None,
                engine="openpyxl",
                keep_default_na=False,
                na_values=[""],
            )
        except Exception as e:
            raise WorkbookError(f"Unable to read workbook {file_path}: {e}") from e

        missing = [name for name in SHEETS if name not in frames]
        if missing:
            raise WorkbookError(f"Missing sheets in {file_path}: {', '.join(missing)}")

        return {name: _sheet_rows(frames[name]) for name in SHEETS}


def run_initial_load(database: Database, file_path: str, reset: bool = True) -> WorkbookImportResponse:
    """Run the one-shot import against the given storage handle"""
    with database.session() as db:
        return WorkbookLoader(db).load_workbook(file_path, reset=reset)
