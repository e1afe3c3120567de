# Project: weather-odds
# Owner: GreenUnicorn
# Built with: Claude (Anthropic)
"""
errors.py — Failure raised when an analysis has nothing to work with.
"""


class NoDataError(RuntimeError):
    """No year in the window produced a usable sample for the target day.

    Partial coverage (some years missing) is not an error; it is reported in
    the result's coverage block. This is raised only when the count is zero.
    """

    def __init__(
        self,
        message: str = "No historical data available for this location and date",
        missing_years: int = 0,
        hint: str = "Try a different location or date",
    ) -> None:
        super().__init__(message)
        self.missing_years = missing_years
        self.hint = hint

    def to_dict(self) -> dict:
        return {"error": str(self), "hint": self.hint, "missingYears": self.missing_years}
