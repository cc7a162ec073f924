import os
from pydantic import BaseModel

from .model import GrowthInputs


class Settings(BaseModel):
    # Logging
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")
    LOG_JSON: bool = os.getenv("LOG_JSON", "false").lower() == "true"

    # Initial values shown in the input form
    DEFAULT_MARKET_PRICE: float = float(os.getenv("DEFAULT_MARKET_PRICE", "54.56"))
    DEFAULT_DIVIDEND: float = float(os.getenv("DEFAULT_DIVIDEND", "3.60"))
    DEFAULT_REQUIRED_RETURN: float = float(os.getenv("DEFAULT_REQUIRED_RETURN", "7.40"))
    DEFAULT_EXPECTED_DIVIDEND: float = float(os.getenv("DEFAULT_EXPECTED_DIVIDEND", "3.50"))

    def default_inputs(self) -> GrowthInputs:
        return GrowthInputs(
            market_price=self.DEFAULT_MARKET_PRICE,
            dividend_amount=self.DEFAULT_DIVIDEND,
            required_return=self.DEFAULT_REQUIRED_RETURN,
            expected_dividend=self.DEFAULT_EXPECTED_DIVIDEND,
        )

settings = Settings()
