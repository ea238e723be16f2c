# tests/conftest.py

from django.conf import settings

if not settings.configured:
    settings.configure(
        CAPABILITY_DISPATCH={
            "COPY_COUNT": 10,
            "OBSERVABILITY": False,
            "SIGNATURE_CHECKS": True,
            "RESULT_POLICY": "log",
        },
    )
