from rest_framework import status
from rest_framework.decorators import api_view
from rest_framework.response import Response
from django.core.management import call_command
from django.core.management.base import CommandError
import structlog

logger = structlog.get_logger()


@api_view(["GET"])
def root(request):
    return Response({"message": "Flashcards API server is running!"})


@api_view(["POST"])
def initialize_data(request):
    file_name = request.data.get("file", "cards.json")
    logger.info("initialize_data", file=file_name)
    try:
        call_command("init_data", file=file_name)
    except (CommandError, OSError, ValueError) as e:
        logger.error("initialize_data_failed", file=file_name, error=str(e))
        return Response({"error": str(e)}, status=status.HTTP_500_INTERNAL_SERVER_ERROR)
    return Response(
        {"message": f"Data initialized successfully from {file_name}"},
        status=status.HTTP_200_OK,
    )
