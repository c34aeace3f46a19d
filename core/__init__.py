# Core package - catalog foundations
#
# Modules:
# - config: Application settings
# - logging: Structured logging
# - storage: Entity store, seed data, joins and queries behind a repository interface
