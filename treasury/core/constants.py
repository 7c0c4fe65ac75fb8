"""Shared domain vocabulary (month names, enums used by schemas and reports)."""

from typing import Literal

# Month names as stored on records and used as keys of FinancialGoal.monthly_goals.
MONTHS: list[str] = [
    "Janeiro", "Fevereiro", "Março", "Abril", "Maio", "Junho",
    "Julho", "Agosto", "Setembro", "Outubro", "Novembro", "Dezembro",
]

ANNUAL_PERIOD = "Anual"
UNSPECIFIED_KEY = "Não informado"

ENTRY = "entry"
EXIT = "exit"

MovementType = Literal["entry", "exit"]
PaymentMethod = Literal["pix", "cash", "transfer"]
UserRole = Literal["admin", "client", "usuario"]
ObreiroTipo = Literal["pastor", "missionaria", "evangelista", "jubilado"]

ADMIN_ROLE = "admin"
DEFAULT_ADMIN_ID = "admin-default"


def month_name(month_number: int) -> str:
    return MONTHS[month_number - 1]
