"""
APPLICATION LAYER - Use Cases & Orchestration

This layer contains:
- queries/   → Read operations (conversion, info, health)
- dto/       → Data Transfer Objects (wire format)
- common/    → Shared interfaces (Query base classes)

Rules:
- Depends on Domain layer only
- No HTTP/framework code here
"""
