"""Domain core: models, repositories, services, schemas and validation."""
