class StatusController:
    def __init__(self, store, payment_controller, notifier):
        self.store = store
        self.payment_controller = payment_controller
        self.notifier = notifier

    async def get_status(self):
        return {
            "success": True,
            "storage": self.store.mode,
            "payments": "mock" if self.payment_controller.is_mock else "live",
            "email": "smtp" if self.notifier.enabled else "log",
        }
