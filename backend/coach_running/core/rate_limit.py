"""
Rate limiting (slowapi). Plan generation hits Gemini twice per call, so it gets its own tighter limit.
Buckets are per remote address: X-Client-Id is caller-chosen and would reset the bucket on every change.
"""

from slowapi import Limiter
from slowapi.util import get_remote_address

from coach_running.config import settings

limiter = Limiter(key_func=get_remote_address, default_limits=[settings.default_rate_limit])
