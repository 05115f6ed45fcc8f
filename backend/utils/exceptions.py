class BadRequestError(ValueError):
    """Raised for caller mistakes (missing dates, bad ranges, duplicates). Routers map it to HTTP 400."""
    pass
