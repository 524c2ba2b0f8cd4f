# ancla/core/utils/timestamp_utils.py

import re
from datetime import datetime, timezone

from ancla.core.config.protocol_constants import ProtocolConstants

_TIMESTAMP_RE = re.compile(ProtocolConstants.TIMESTAMP_PATTERN)

class TimestampUtils:

    @staticmethod
    def parse(text: str) -> datetime:
        """
        Parsea yyyy-MM-ddTHH:mm:ss.ffffffZ de forma estricta.
        strptime por sí solo acepta 1-6 dígitos en %f; la regex exige exactamente seis.
        """
        if not isinstance(text, str) or not _TIMESTAMP_RE.fullmatch(text):
            raise ValueError(f"Timestamp con formato inválido: {text!r}")
        parsed = datetime.strptime(text, ProtocolConstants.TIMESTAMP_FORMAT)
        return parsed.replace(tzinfo=timezone.utc)

    @staticmethod
    def format(moment: datetime) -> str:
        utc = TimestampUtils.as_utc(moment)
        # %Y no rellena con ceros los años < 1000 en glibc
        return f"{utc.year:04d}" + utc.strftime(ProtocolConstants.TIMESTAMP_FORMAT[2:])

    @staticmethod
    def as_utc(moment: datetime) -> datetime:
        # Naive = UTC
        if moment.tzinfo is None:
            return moment.replace(tzinfo=timezone.utc)
        return moment.astimezone(timezone.utc)
