from urllib.parse import parse_qsl, urlsplit

from pydantic import BaseModel, Field


class PaymentResponse(BaseModel):
    redirect_url: str = Field(..., description="Gateway payment page URL with all signed fields")

    @property
    def params(self) -> dict[str, str]:
        """Query parameters of the redirect URL."""
        return dict(parse_qsl(urlsplit(self.redirect_url).query, keep_blank_values=True))
