"""Password policy domain: value objects, rules and services."""
