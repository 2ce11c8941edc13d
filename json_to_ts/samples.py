"""
Built-in sample document, loaded by ``json_to_ts --sample``.
"""

import json

SAMPLE_JSON = """{
  "id": 1,
  "user_name": "john_doe",
  "email": "john@example.com",
  "is_active": true,
  "roles": ["admin", "user"],
  "profile": {
    "first_name": "John",
    "last_name": "Doe",
    "age": 30,
    "avatar_url": null
  },
  "addresses": [
    {
      "street": "123 Main St",
      "city": "New York",
      "zip_code": "10001"
    }
  ],
  "tags": [],
  "scores": [98.5, 87, "n/a"],
  "metadata": null
}
"""


def load_sample():
    """Return the sample document decoded."""
    return json.loads(SAMPLE_JSON)
