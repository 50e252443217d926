

class InvalidPurchaseError(Exception):
    """
    Raised when a ticket purchase request breaks a business rule.
    The request has no side effects and must be re-submitted.
    """

    def __init__(self, reason: str):
        self.reason = reason
        super().__init__(reason)
