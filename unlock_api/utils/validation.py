class Validation:
    @staticmethod
    async def validate_required_text_async(errors, field, value):
        if not isinstance(value, str) or not value.strip():
            errors.setdefault(field, []).append("IS_REQUIRED")

    @staticmethod
    async def validate_amount_async(errors, field, value):
        if value is None:
            errors.setdefault(field, []).append("IS_REQUIRED")
        elif isinstance(value, bool) or not isinstance(value, int) or value <= 0:
            errors.setdefault(field, []).append("IS_INVALID")
