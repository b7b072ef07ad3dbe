from typing import Literal
from pydantic import BaseModel, Field

from src.domain.ticket_request import TicketType, TicketTypeRequest


class TicketTypeRequestItem(BaseModel):
    ticket_type: TicketType
    quantity: int = Field(ge=0)

    def to_domain(self) -> TicketTypeRequest:
        return TicketTypeRequest(
            ticket_type=self.ticket_type,
            quantity=self.quantity,
        )


class PurchaseRequest(BaseModel):
    ticket_type_requests: list[TicketTypeRequestItem]


class PurchaseResponse(BaseModel):
    account_id: int
    status: Literal["PURCHASED"] = "PURCHASED"


class ErrorDetail(BaseModel):
    code: str
    description: str
    message: str
