# API package - HTTP consumer of the catalog repository
#
# Modules:
# - server: FastAPI application factory and lifespan
# - dependencies: repository injection
# - routes: categories, articles, solutions, health
# - schemas: request/response models
