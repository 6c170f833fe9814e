from enum import Enum
from typing import List, Optional

from pydantic import BaseModel


class BookInstanceStatus(str, Enum):
    AVAILABLE = "Available"
    MAINTENANCE = "Maintenance"
    LOANED = "Loaned"
    RESERVED = "Reserved"


class BookCopy(BaseModel):
    imprint: Optional[str] = None
    # free text: statuses outside BookInstanceStatus are passed through
    status: Optional[str] = None


class BookDetails(BaseModel):
    title: Optional[str] = None
    author: Optional[str] = None
    copies: List[BookCopy] = []
