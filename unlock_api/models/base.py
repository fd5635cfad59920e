import datetime
import mongoengine as me


def utc_now():
    return datetime.datetime.now(datetime.timezone.utc)


class BaseDocument(me.Document):
    created_at = me.DateTimeField(default=utc_now)
    updated_at = me.DateTimeField(default=utc_now)

    meta = {"abstract": True}

    def save(self, *args, **kwargs):
        self.updated_at = utc_now()
        return super().save(*args, **kwargs)
