"""
Service layer abstraction.

Each service encapsulates the operations of one domain and delegates
persistence to a repository.
"""
