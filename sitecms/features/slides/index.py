"""
Hero Slides Feature Module.
"""
from flask import Blueprint
from sitecms.features.slides.controller.slide_controller import SlideController
from sitecms.features.slides.service.slide_service import SlideService
from sitecms.features.slides.repository.slide_repository import SlideRepository

# Dependency Injection
slide_repository = SlideRepository()
slide_service = SlideService(slide_repository=slide_repository)
slide_controller = SlideController(slide_service=slide_service)

# Blueprint
slides_bp = Blueprint('slides', __name__)

# Routes
slides_bp.add_url_rule('/api/slides', view_func=slide_controller.list_slides, methods=['GET'])
slides_bp.add_url_rule('/api/slides', view_func=slide_controller.create_slide, methods=['POST'])
slides_bp.add_url_rule('/api/slides/<slide_id>', view_func=slide_controller.update_slide, methods=['PUT'])
slides_bp.add_url_rule('/api/slides/<slide_id>', view_func=slide_controller.delete_slide, methods=['DELETE'])
