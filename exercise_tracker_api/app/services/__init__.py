"""
Service layer abstraction.

Each service encapsulates business logic for a domain and works on
the dataset through ``JsonStore``, keeping API handlers free of
persistence details.
"""
