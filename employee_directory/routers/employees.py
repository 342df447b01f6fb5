# employee_directory/routers/employees.py
from typing import Any
from fastapi import APIRouter, Depends, Request, status
from fastapi.responses import JSONResponse
from employee_directory.errors import UnsupportedMediaType, ValidationError
from employee_directory.schemas import (
    EmployeeOut,
    parse_employee_create,
    parse_employee_delete,
)
from employee_directory.store import EmployeeStore, get_store

router = APIRouter()

# -------- utilidades --------
async def json_body(request: Request) -> Any:
    """Cuerpo JSON de la petición; 415 si no es application/json."""
    content_type = request.headers.get("content-type", "")
    if "application/json" not in content_type.lower():
        raise UnsupportedMediaType()
    try:
        return await request.json()
    except ValueError as exc:
        raise ValidationError(["Request body must be valid JSON"]) from exc


@router.get("/employees", tags=["Employees"], summary="Listar empleados (más recientes primero)",
            response_model=list[EmployeeOut])
def list_employees(store: EmployeeStore = Depends(get_store)):
    return store.list_all()

@router.post("/employees", tags=["Employees"], summary="Alta de empleado",
             status_code=status.HTTP_201_CREATED, response_model=EmployeeOut,
             responses={400: {"description": "Errores de validación"},
                        409: {"description": "NIRC duplicado"},
                        415: {"description": "Content-Type no JSON"}})
def create_employee(payload: Any = Depends(json_body), store: EmployeeStore = Depends(get_store)):
    data = parse_employee_create(payload)
    return store.create(data)

@router.delete("/employees", tags=["Employees"], summary="Borrado masivo (todo o nada)",
               responses={400: {"description": "ids inválidos o inexistentes"},
                          415: {"description": "Content-Type no JSON"}})
def delete_employees(payload: Any = Depends(json_body), store: EmployeeStore = Depends(get_store)):
    data = parse_employee_delete(payload)
    result = store.delete_many(data.ids)
    code = status.HTTP_200_OK if result.success else status.HTTP_400_BAD_REQUEST
    return JSONResponse(result.to_body(), status_code=code)
