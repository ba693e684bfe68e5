"""Hello-world HTTP service for ECS Fargate."""

__version__ = "1.0.0"
