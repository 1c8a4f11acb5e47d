"""Avatar Storage Service Package."""

__version__ = "1.0.0"
__description__ = (
    "Serverless avatar upload, validation and URL resolution using AWS Lambda, S3, and DynamoDB"
)

__all__ = ["handlers", "core"]
