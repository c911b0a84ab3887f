"""
API Services Layer.

Database operations for the pipeline endpoints: entity resolution, status
transitions, unified views, notifications and supporting CRUD.
"""
