"""Domain layer: errors, rules, validators."""
