"""
Product Service.
Shop catalogue management; product images live in Firebase Storage.
"""
from typing import Any, Dict, List, Optional
from sitecms.common.base.base_service import BaseService, NotFoundError
from sitecms.features.products.dto.product_request import ProductRequest
from sitecms.features.products.repository.product_repository import ProductRepository
from sitecms.features.uploads.service.image_upload_service import ImageUploadService
from sitecms.services.system.logger_service import get_logger, log_content_operation

logger = get_logger(__name__)

DEFAULT_CATEGORY = 'Cleaning'


class ProductService(BaseService):
    def __init__(self, product_repository: ProductRepository, upload_service: ImageUploadService):
        super().__init__()
        self.product_repository = product_repository
        self.upload_service = upload_service

    def list_products(self, search: Optional[str] = None) -> List[Dict[str, Any]]:
        products = self.product_repository.list_with_fallback('createdAt', descending=True)
        if not search:
            return products
        needle = search.strip().lower()
        return [
            p for p in products
            if needle in str(p.get('title') or '').lower() or needle in str(p.get('category') or '').lower()
        ]

    def get_stats(self) -> Dict[str, Any]:
        products = self.product_repository.list_all()
        categories: Dict[str, int] = {}
        for product in products:
            category = product.get('category') or DEFAULT_CATEGORY
            categories[category] = categories.get(category, 0) + 1

        in_stock = len([p for p in products if p.get('inStock')])
        return {
            'total': len(products),
            'inStock': in_stock,
            'outOfStock': len(products) - in_stock,
            'totalValue': round(sum(float(p.get('price') or 0) for p in products), 2),
            'categories': categories,
        }

    def get_product(self, product_id: str) -> Dict[str, Any]:
        product = self.product_repository.find_by_id(product_id)
        if not product:
            raise NotFoundError('Product not found')
        return product

    @staticmethod
    def _fields(request: ProductRequest) -> Dict[str, Any]:
        return {
            'title': request.title,
            'description': (request.description or '').strip(),
            'price': request.price,
            'imageUrl': (request.imageUrl or '').strip(),
            'category': (request.category or '').strip() or DEFAULT_CATEGORY,
            'inStock': True if request.inStock is None else request.inStock,
        }

    def create_product(self, request: ProductRequest, admin_id=None) -> Dict[str, Any]:
        now = self.now_iso()
        data = {**self._fields(request), 'createdAt': now, 'updatedAt': now}
        product_id = self.product_repository.add(data)
        log_content_operation(logger, 'CREATE', 'product', product_id, admin_id, price=request.price)
        return {'id': product_id, **data}

    def update_product(self, product_id: str, request: ProductRequest, admin_id=None) -> Dict[str, Any]:
        existing = self.get_product(product_id)
        data = {**self._fields(request), 'updatedAt': self.now_iso()}
        self.product_repository.update(product_id, data)

        old_image = existing.get('imageUrl')
        if old_image and old_image != data['imageUrl']:
            self.upload_service.delete_image(old_image)

        log_content_operation(logger, 'UPDATE', 'product', product_id, admin_id)
        return {**existing, **data}

    def delete_product(self, product_id: str, admin_id=None) -> None:
        product = self.get_product(product_id)
        self.product_repository.delete(product_id)
        image_deleted = self.upload_service.delete_image(product.get('imageUrl'))
        log_content_operation(logger, 'DELETE', 'product', product_id, admin_id, image_deleted=image_deleted)
