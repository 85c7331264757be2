"""
API endpoints для работы с категориями товаров.
"""

from typing import List

from fastapi import APIRouter, Depends, HTTPException, Query, status

from backoffice.api.v1.dependencies import get_taxonomy_service
from backoffice.schemas.category import CategoryIn, CategoryNode, CategoryOut
from backoffice.services.taxonomy_service import TaxonomyService, build_category_tree

router = APIRouter()


@router.get("", response_model=List[CategoryOut])
def list_categories(service: TaxonomyService = Depends(get_taxonomy_service)):
    """
    Получить все категории товаров плоским списком.

    Сначала корневые категории, затем по названию; у каждой
    категории есть количество товаров (products_count).
    """
    return service.get_tree()


@router.get("/tree", response_model=List[CategoryNode])
def category_tree(service: TaxonomyService = Depends(get_taxonomy_service)):
    """Получить категории в виде вложенного дерева."""
    return build_category_tree(service.get_tree())


@router.get("/{category_id}", response_model=CategoryOut)
def get_category(category_id: int, service: TaxonomyService = Depends(get_taxonomy_service)):
    """
    Получить категорию по ID.

    Raises:
        HTTPException: Если категория не найдена
    """
    category = service.get_by_id(category_id)
    if category is None:
        raise HTTPException(404, detail="Category not found")
    return category


@router.post("", response_model=CategoryOut, status_code=status.HTTP_201_CREATED)
def create_category(data: CategoryIn, service: TaxonomyService = Depends(get_taxonomy_service)):
    """Создать категорию."""
    return service.create(data.model_dump(exclude_unset=True))


@router.put("/{category_id}", response_model=CategoryOut)
def update_category(
    category_id: int,
    data: CategoryIn,
    service: TaxonomyService = Depends(get_taxonomy_service),
):
    """Обновить категорию."""
    category = service.update(category_id, data.model_dump(exclude_unset=True))
    if category is None:
        raise HTTPException(404, detail="Category not found")
    return category


@router.delete("/{category_id}")
def delete_category(category_id: int, service: TaxonomyService = Depends(get_taxonomy_service)):
    """Удалить категорию (связи с товарами удаляются каскадно)."""
    if not service.delete(category_id):
        raise HTTPException(404, detail="Category not found")
    return {"message": "Category deleted successfully"}
