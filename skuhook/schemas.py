
from pydantic import BaseModel, ConfigDict, Field
from typing import List, Optional

# Only the parts of the order payload the webhook reads
class LineItem(BaseModel):
    model_config = ConfigDict(extra="ignore")

    sku: Optional[str] = None  # storefronts send null for untracked products

class PurchaseEvent(BaseModel):
    model_config = ConfigDict(extra="ignore")

    line_items: List[LineItem] = Field(default_factory=list)

    def skus(self) -> List[Optional[str]]:
        return [item.sku for item in self.line_items]

class WebhookResponse(BaseModel):
    ok: bool = True
    matched: List[str] = Field(default_factory=list)
    checked: int = 0
