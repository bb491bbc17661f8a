"""
Infrastructure persistence layer - Prisma implementation of the gateway port.
"""

from tracker.infrastructure.persistence.prisma_gateway import PrismaGateway

__all__ = ["PrismaGateway"]
