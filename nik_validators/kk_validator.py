"""
KK (Kartu Keluarga) validator

A family-card number encodes only the household's region; it has no birth
date, gender or registration order, so the result carries the address and
postal code only.
"""
from .base_validator import BaseValidator
from .results import InvalidResult, KKResult, ParseResult
from .utils.logger import get_logger, mask_number

logger = get_logger(__name__)


class KKValidator(BaseValidator):
    """KK number validator"""

    LABEL = 'KK number'

    GROUP_SIZE = 4

    def parse(self) -> ParseResult:
        if not self.validate():
            logger.debug(f"KK {mask_number(self.number)} is not valid")
            return InvalidResult()

        return KKResult(
            number=self.number,
            address=self.get_address(),
            postal_code=self.get_postal_code(),
        )

    def get_formatted_number(self) -> str:
        """1234-5678-9012-3456"""
        size = self.GROUP_SIZE
        return '-'.join(self.number[i:i + size] for i in range(0, len(self.number), size))

    def get_raw_number(self) -> str:
        return self.number
