from rest_framework import views, status
from rest_framework.response import Response
import structlog

from ..domain import DIFFICULTY_LABELS, CardNotFound, DuplicateCard, InvalidDifficulty
from ..services import study
from .serializers import CardInSerializer, CardOutSerializer, HintQuerySerializer, UpdateInSerializer

logger = structlog.get_logger()


def error(message, status_code):
    return Response({"error": message}, status=status_code)


class PracticeView(views.APIView):
    def get(self, request):
        cards, day = study.practice_session()
        return Response({"cards": CardOutSerializer(cards, many=True).data, "day": day})


class UpdateView(views.APIView):
    def post(self, request):
        s = UpdateInSerializer(data=request.data)
        if not s.is_valid():
            logger.info("update_rejected", errors=s.errors)
            return error("Missing required fields: cardFront, cardBack, difficulty", status.HTTP_400_BAD_REQUEST)

        front = s.validated_data["cardFront"]
        back = s.validated_data["cardBack"]
        try:
            record = study.record_review(front, back, s.validated_data["difficulty"])
        except InvalidDifficulty as e:
            return error(f"Invalid difficulty level: {e.value}", status.HTTP_400_BAD_REQUEST)
        except CardNotFound:
            logger.info("update_card_not_found", front=front, back=back)
            return error("Card not found", status.HTTP_404_NOT_FOUND)

        return Response(
            {
                "message": "Card review updated successfully",
                "previousBucket": record.previous_bucket,
                "newBucket": record.new_bucket,
                "difficultyLabel": DIFFICULTY_LABELS[record.difficulty],
            }
        )


class HintView(views.APIView):
    def get(self, request):
        qs = HintQuerySerializer(data=request.query_params)
        if not qs.is_valid():
            return error("Missing required query parameters: cardFront, cardBack", status.HTTP_400_BAD_REQUEST)

        try:
            hint = study.hint_for(qs.validated_data["cardFront"], qs.validated_data["cardBack"])
        except CardNotFound:
            return error("Card not found", status.HTTP_404_NOT_FOUND)
        return Response({"hint": hint})


class ProgressView(views.APIView):
    def get(self, request):
        return Response(study.progress().as_dict())


class NextDayView(views.APIView):
    def post(self, request):
        day = study.next_day()
        return Response({"message": f"Advanced to day {day}", "currentDay": day})


class CardsView(views.APIView):
    def post(self, request):
        s = CardInSerializer(data=request.data)
        if not s.is_valid():
            logger.info("card_rejected", errors=s.errors)
            if s.errors.keys() & {"front", "back"}:
                return error("Missing required fields: front, back", status.HTTP_400_BAD_REQUEST)
            return error(f"Invalid fields: {', '.join(sorted(s.errors))}", status.HTTP_400_BAD_REQUEST)

        try:
            row = study.add_card(**s.validated_data)
        except DuplicateCard:
            return error("Card already exists", status.HTTP_409_CONFLICT)

        return Response(
            {
                "id": row.pk,
                "front": row.front,
                "back": row.back,
                "hint": row.hint,
                "tags": row.tags,
                "bucket": row.bucket,
            },
            status=status.HTTP_201_CREATED,
        )
