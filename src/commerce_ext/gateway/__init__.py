"""Remote data gateway protocol and implementations."""

from commerce_ext.gateway.base import CreateResult, DataGateway, QueryResult
from commerce_ext.gateway.sfdx import SfdxGateway

__all__ = ["DataGateway", "QueryResult", "CreateResult", "SfdxGateway"]
