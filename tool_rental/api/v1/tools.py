"""GET /v1/tools - browse the rental catalog"""

from dataclasses import asdict

from fastapi import APIRouter, Depends, HTTPException

from tool_rental.api.dependencies import get_catalog
from tool_rental.api.v1.schemas import ToolListResponse, ToolSchema
from tool_rental.infrastructure.catalog import ToolCatalog

router = APIRouter()


@router.get("/tools", response_model=ToolListResponse)
def list_tools(catalog: ToolCatalog = Depends(get_catalog)):
    """List every rentable tool, ordered by code"""
    return ToolListResponse(tools=[ToolSchema(**asdict(tool)) for tool in catalog.tools()])


@router.get("/tools/{tool_code}", response_model=ToolSchema)
def get_tool(tool_code: str, catalog: ToolCatalog = Depends(get_catalog)):
    tool = catalog.find_by_code(tool_code)
    if tool is None:
        raise HTTPException(status_code=404, detail=f"Tool with code {tool_code} does not exist.")
    return ToolSchema(**asdict(tool))
