# sc2k_decoder/segments/xlab.py
from construct import Array, Bytes, ConstructError, Int8ub, Struct

from ..constants import LABEL_COUNT, LABEL_TEXT_SIZE
from ..exceptions import MalformedSegment
from ..models import CityBuilder
from .base import BaseSegment, decode_text

LabelEntry = Struct(
    "length" / Int8ub,
    "text" / Bytes(LABEL_TEXT_SIZE),
)

XlabLayout = Array(LABEL_COUNT, LabelEntry)


class XlabSegment(BaseSegment):
    """XLAB (labels) interpreter.

    256 fixed slots of 25 bytes: a length byte followed by 24 bytes of text.
    """

    TITLE = 'XLAB'
    ENTRY_SIZE = 1 + LABEL_TEXT_SIZE

    def apply(self, city: CityBuilder) -> None:
        try:
            entries = XlabLayout.parse(self.data)
        except ConstructError as e:
            raise MalformedSegment(
                f"expected {LABEL_COUNT * self.ENTRY_SIZE} bytes, got {len(self.data)}",
                self.TITLE,
            ) from e

        labels = []
        for entry in entries:
            length = min(entry.length, LABEL_TEXT_SIZE)
            labels.append(decode_text(entry.text[:length]))
        city.attributes['labels'] = labels
