"""
AWS Lambda handler — Mangum wrapper for FastAPI.
"""

from mangum import Mangum

from a11yflash.main import app

handler = Mangum(app, lifespan="off")
