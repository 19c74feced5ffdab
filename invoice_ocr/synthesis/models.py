import json
from dataclasses import asdict, dataclass

RECORD_FIELDS: tuple[str, ...] = (
    "invoice_number",
    "supplier",
    "invoice_date",
    "due_date",
    "total_amount",
    "currency",
    "description",
    "po",
    "IGST",
    "CGST",
    "SGST",
)


@dataclass(frozen=True)
class InvoiceRecord:
    """Structured invoice data, one value per schema field.

    Values keep the JSON type the model returned; nothing is coerced.
    """

    invoice_number: object = ""
    supplier: object = ""
    invoice_date: object = ""
    due_date: object = ""
    total_amount: object = 0
    currency: object = ""
    description: object = ""
    po: object = ""
    IGST: object = ""
    CGST: object = ""
    SGST: object = ""

    def to_dict(self) -> dict[str, object]:
        return asdict(self)

    def to_form_data(self) -> dict[str, str]:
        """Stringify every field for an urlencoded form body."""
        return {name: _form_value(getattr(self, name)) for name in RECORD_FIELDS}


def _form_value(value: object) -> str:
    if value is None:
        return ""
    if isinstance(value, str):
        return value
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return json.dumps(value)
