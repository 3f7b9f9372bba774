"""Example usage of the jsonmask engine."""

import json
from jsonmask import (
    JsonMask,
    mask_filled_string,
    mask_hash_string,
    mask_random_float,
    mask_random_int,
)

document = {
    "id": "INV-001",
    "customer": {
        "name": "Jane Doe",
        "email": "jane@example.com",
        "phone": "+1 555 0100",
    },
    "payment": {
        "card": {"number": "4111111111111111", "cvv": 123},
        "amount": 100.25,
    },
    "lineItems": [
        {"sku": "WIDGET-001", "quantity": 5, "unitPrice": 10.00},
        {"sku": "GADGET-002", "quantity": 2, "unitPrice": 25.50},
    ],
    "tags": ["vip", "newsletter"],
}

# Global fields mask every occurrence, paths mask one location
masker = JsonMask(
    "card",                 # whole card object
    "phone",                # any "phone" key
    "/customer/email",      # only the customer's email
    "/lineItems[1]/sku",    # only the second line item's sku
    "/tags[0]",             # first tag
    "/payment/amount",
)
masker.register_mask_string_func(mask_hash_string())
masker.register_mask_int_func(mask_random_int(1000))
masker.register_mask_float_func(mask_random_float("1000.2"))

print("Hashed:")
print(json.dumps(json.loads(masker.mask(json.dumps(document))), indent=2))

# Replace the string function: fill with asterisks, keeping the length
masker.register_mask_string_func(mask_filled_string("*"))

print("\nFilled:")
print(json.dumps(json.loads(masker.mask(json.dumps(document))), indent=2))


def redact_domain(path: str, value: str) -> str:
    """Custom mask function: keep the mailbox, drop the domain."""
    mailbox, _, _ = value.partition("@")
    return f"{mailbox}@***"


custom = JsonMask("email")
custom.register_mask_string_func(redact_domain)

print("\nCustom:")
print(custom.mask(json.dumps(document)))
