from typing import Any, List, Mapping, Sequence
from dataclasses import dataclass

from ..utils.normalization import normalize_name

DEFAULT_NAME_COLUMN = 'Name of The Deceased'


@dataclass
class ValidationError:
    row_number: int
    field: str
    message: str
    severity: str  # 'CRITICAL', 'WARNING'


class RecordValidator:
    """Validates spreadsheet records before matching."""

    def __init__(self, name_column: str = DEFAULT_NAME_COLUMN):
        self.name_column = name_column
        self.errors: List[ValidationError] = []
        self.stats = {
            'total_rows': 0,
            'rows_with_name': 0,
            'rows_without_name': 0
        }

    def validate(self, records: Sequence[Mapping[str, Any]]) -> bool:
        """Validates the record set as a whole and each row's name.

        An empty record set is valid. A non-empty set must carry the name
        column and at least one usable name; rows with an empty name are
        reported as warnings only.
        """
        if not records:
            return True

        if not any(self.name_column in record for record in records):
            self.errors.append(
                ValidationError(
                    row_number=0,
                    field='HEADERS',
                    message=f'Missing required column: {self.name_column}',
                    severity='CRITICAL'
                )
            )
            return False

        # Spreadsheet rows are numbered from 2, below the header row
        for row_num, record in enumerate(records, start=2):
            self.stats['total_rows'] += 1
            if normalize_name(record.get(self.name_column)):
                self.stats['rows_with_name'] += 1
            else:
                self.stats['rows_without_name'] += 1
                self.errors.append(
                    ValidationError(
                        row_number=row_num,
                        field=self.name_column,
                        message='Empty name',
                        severity='WARNING'
                    )
                )

        if not self.stats['rows_with_name']:
            self.errors.append(
                ValidationError(
                    row_number=0,
                    field=self.name_column,
                    message=f'Spreadsheet is empty or column "{self.name_column}" has no names',
                    severity='CRITICAL'
                )
            )
            return False

        return True

    @property
    def critical(self) -> List[ValidationError]:
        return [e for e in self.errors if e.severity == 'CRITICAL']

    @property
    def warnings(self) -> List[ValidationError]:
        return [e for e in self.errors if e.severity == 'WARNING']
