"""Error types and message constants for storefront flows."""


class errmsg:
    """Message constants shared by the checkout and registration flows."""

    INVALID_AMOUNT = "Invalid amount"
    PAYMENT_SUCCESSFUL = "Payment successful"
    NEGATIVE_PRICE = "Price cannot be negative"
    QUANTITY_POSITIVE = "Quantity must be positive"
    INVALID_EMAIL = "Invalid email format"
    EMAIL_REGISTERED = "Email already registered"
    WEAK_PASSWORD = "Password does not meet requirements"
    REGISTRATION_SUCCESSFUL = (
        "Registration successful. Please check your email for verification."
    )


class ConfigError(Exception):
    """Environment configuration could not be parsed."""

    def __init__(self, variable: str, value: str, expected: str):
        super().__init__(f"{variable}={value!r}: expected {expected}")
        self.variable = variable
        self.value = value
