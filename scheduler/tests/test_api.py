import pytest
import logging
from django.urls import reverse

from scheduler.data.models import CardBucket, PracticeLog, StudyClock
from scheduler.domain import DIFFICULTY_LABELS, card_key

logger = logging.getLogger(__name__)

# Helpers


def make_card(front, back, bucket=0, hint="", tags=None):
    return CardBucket.objects.create(front=front, back=back, bucket=bucket, hint=hint, tags=tags or [])


def post_update(client, front, back, difficulty):
    url = reverse("update")
    payload = {"cardFront": front, "cardBack": back, "difficulty": difficulty}
    resp = client.post(url, data=payload, content_type="application/json")
    data = resp.json()
    logger.info(
        "POST /api/update difficulty=%s (%s) → status=%s previous=%s new=%s",
        difficulty,
        DIFFICULTY_LABELS.get(difficulty, "?"),
        resp.status_code,
        data.get("previousBucket"),
        data.get("newBucket"),
    )
    return resp


def get_practice(client):
    resp = client.get(reverse("practice"))
    data = resp.json()
    logger.info("GET /api/practice → status=%s day=%s card_count=%s", resp.status_code, data["day"], len(data["cards"]))
    return resp


def next_day(client):
    return client.post(reverse("day-next"), data={}, content_type="application/json")


def fronts(resp):
    return [card["front"] for card in resp.json()["cards"]]


# Tests


def test_root(client):
    resp = client.get("/")
    assert resp.status_code == 200
    assert resp.json() == {"message": "Flashcards API server is running!"}


@pytest.mark.django_db
def test_day_zero_practice_returns_every_card(client):
    make_card("Paris", "France of capital", bucket=0)
    make_card("Berlin", "Germany of capital", bucket=1)
    make_card("Tokyo", "Japan of capital", bucket=5, tags=["asia"])

    resp = get_practice(client)

    assert resp.status_code == 200
    assert resp.json()["day"] == 0
    assert fronts(resp) == ["Berlin", "Paris", "Tokyo"]
    tokyo = resp.json()["cards"][2]
    assert tokyo == {"front": "Tokyo", "back": "Japan of capital", "hint": None, "tags": ["asia"]}


@pytest.mark.django_db
def test_practice_follows_day_counter(client):
    make_card("Paris", "France of capital", bucket=0)
    make_card("Berlin", "Germany of capital", bucket=1)

    next_day(client)
    resp = get_practice(client)
    assert resp.json()["day"] == 1
    assert fronts(resp) == ["Paris"]

    next_day(client)
    assert fronts(get_practice(client)) == ["Berlin", "Paris"]


@pytest.mark.django_db
def test_practice_with_no_cards(client):
    resp = get_practice(client)
    assert resp.status_code == 200
    assert resp.json() == {"cards": [], "day": 0}


@pytest.mark.django_db
def test_update_easy_moves_card_and_logs_it(client):
    make_card("Paris", "France of capital", bucket=2)

    resp = post_update(client, "Paris", "France of capital", 2)

    assert resp.status_code == 200
    data = resp.json()
    assert data["message"] == "Card review updated successfully"
    assert (data["previousBucket"], data["newBucket"]) == (2, 3)
    assert data["difficultyLabel"] == "Easy"
    assert CardBucket.objects.get(front="Paris").bucket == 3

    log = PracticeLog.objects.get()
    assert (log.front, log.day, log.difficulty, log.previous_bucket, log.new_bucket) == ("Paris", 0, 2, 2, 3)


@pytest.mark.django_db
@pytest.mark.parametrize("difficulty, expected", [(0, 0), (1, 3), ("2", 5)])
def test_update_transitions(client, difficulty, expected):
    make_card("Paris", "France of capital", bucket=4)
    resp = post_update(client, "Paris", "France of capital", difficulty)
    assert resp.status_code == 200
    assert resp.json()["newBucket"] == expected


@pytest.mark.django_db
def test_update_unknown_card_returns_404(client):
    resp = post_update(client, "NonExistent Front", "NonExistent Back", 1)
    assert resp.status_code == 404
    assert resp.json()["error"] == "Card not found"
    assert PracticeLog.objects.count() == 0


@pytest.mark.django_db
def test_update_missing_difficulty_returns_400(client):
    resp = client.post(
        reverse("update"), data={"cardFront": "Test", "cardBack": "Test"}, content_type="application/json"
    )
    assert resp.status_code == 400
    assert "Missing required fields" in resp.json()["error"]


@pytest.mark.django_db
@pytest.mark.parametrize("difficulty", [99, -1, "hard", True])
def test_update_invalid_difficulty_returns_400(client, difficulty):
    make_card("Test", "Test")
    resp = post_update(client, "Test", "Test", difficulty)
    assert resp.status_code == 400
    assert "Invalid difficulty level" in resp.json()["error"]
    assert CardBucket.objects.get(front="Test").bucket == 0


@pytest.mark.django_db
def test_hint_explicit_and_default(client):
    make_card("Hint Test Front", "Hint Test Back", hint="Specific Hint Here")
    make_card("Hint Test Default", "Hint Test Default Back")

    resp = client.get(reverse("hint"), {"cardFront": "Hint Test Front", "cardBack": "Hint Test Back"})
    assert resp.status_code == 200
    assert resp.json() == {"hint": "Specific Hint Here"}

    resp = client.get(reverse("hint"), {"cardFront": "Hint Test Default", "cardBack": "Hint Test Default Back"})
    assert resp.status_code == 200
    assert resp.json()["hint"] == "Think about the key concepts related to Hint Test Default"


@pytest.mark.django_db
def test_hint_unknown_card_returns_404(client):
    resp = client.get(reverse("hint"), {"cardFront": "NoExist", "cardBack": "NoExist"})
    assert resp.status_code == 404
    assert resp.json()["error"] == "Card not found"


@pytest.mark.django_db
@pytest.mark.parametrize("params", [{"cardFront": "OnlyFront"}, {"cardFront": " ", "cardBack": "B"}, {}])
def test_hint_missing_params_returns_400(client, params):
    resp = client.get(reverse("hint"), params)
    assert resp.status_code == 400
    assert "Missing required query parameters" in resp.json()["error"]


@pytest.mark.django_db
def test_progress_without_history(client):
    make_card("F1", "B1", bucket=0)
    make_card("F2", "B2", bucket=0)
    make_card("F3", "B3", bucket=2)

    resp = client.get(reverse("progress"))

    assert resp.status_code == 200
    data = resp.json()
    assert data["bucketDistribution"] == {"0": 2, "2": 1}
    assert "1" not in data["bucketDistribution"]
    assert data["accuracyRate"] == 0
    assert "averageDifficulty" not in data


@pytest.mark.django_db
def test_progress_after_reviews(client):
    make_card("F1", "B1")
    make_card("F2", "B2")
    post_update(client, "F1", "B1", 2)
    post_update(client, "F2", "B2", 0)
    post_update(client, "F1", "B1", 1)

    data = client.get(reverse("progress")).json()

    assert data["bucketDistribution"] == {"0": 2}
    assert data["accuracyRate"] == pytest.approx(2 / 3)
    assert data["averageDifficulty"] == pytest.approx(1.0)


@pytest.mark.django_db
def test_next_day_increments_counter(client):
    resp = next_day(client)
    assert resp.status_code == 200
    assert resp.json() == {"message": "Advanced to day 1", "currentDay": 1}

    resp = next_day(client)
    assert resp.json()["currentDay"] == 2
    assert StudyClock.objects.get().day == 2


@pytest.mark.django_db
def test_create_card(client):
    payload = {"front": "Create Test Front", "back": "Create Test Back", "hint": "Create Hint", "tags": ["create", "test"]}
    resp = client.post(reverse("cards"), data=payload, content_type="application/json")

    assert resp.status_code == 201
    data = resp.json()
    assert data["front"] == payload["front"]
    assert data["back"] == payload["back"]
    assert data["hint"] == payload["hint"]
    assert data["tags"] == payload["tags"]
    assert data["bucket"] == 0
    assert CardBucket.objects.filter(pk=data["id"]).exists()


@pytest.mark.django_db
def test_create_duplicate_card_returns_409(client):
    make_card("Paris", "France of capital")
    resp = client.post(
        reverse("cards"), data={"front": "Paris", "back": "France of capital"}, content_type="application/json"
    )
    assert resp.status_code == 409
    assert resp.json()["error"] == "Card already exists"


@pytest.mark.django_db
@pytest.mark.parametrize("payload", [{"front": "Only front"}, {"front": "  ", "back": "B"}])
def test_create_card_missing_fields_returns_400(client, payload):
    resp = client.post(reverse("cards"), data=payload, content_type="application/json")
    assert resp.status_code == 400
    assert "Missing required fields" in resp.json()["error"]


@pytest.mark.django_db
def test_paris_scenario_over_http(client):
    client.post(reverse("cards"), data={"front": "Paris", "back": "France of capital"}, content_type="application/json")
    post_update(client, "Paris", "France of capital", 2)
    post_update(client, "Paris", "France of capital", 2)

    for _ in range(3):
        next_day(client)
    assert "Paris" not in fronts(get_practice(client))

    next_day(client)
    resp = get_practice(client)
    assert resp.json()["day"] == 4
    assert "Paris" in fronts(resp)
    logger.info("✓ Passed: bucket 2 card due on day 4, not on day 3")


@pytest.mark.django_db
def test_update_null_difficulty_is_invalid_not_missing(client):
    make_card("Test", "Test")
    resp = post_update(client, "Test", "Test", None)
    assert resp.status_code == 400
    assert resp.json()["error"] == "Invalid difficulty level: None"


@pytest.mark.django_db
@pytest.mark.parametrize("tags", [[""], "geo", [["nested"]]])
def test_create_card_bad_tags_are_reported_as_tags(client, tags):
    resp = client.post(
        reverse("cards"), data={"front": "F", "back": "B", "tags": tags}, content_type="application/json"
    )
    assert resp.status_code == 400
    assert resp.json()["error"] == "Invalid fields: tags"
    assert CardBucket.objects.count() == 0


@pytest.mark.django_db
def test_cards_are_stored_and_found_by_content_key(client):
    client.post(reverse("cards"), data={"front": "Paris", "back": "France of capital"}, content_type="application/json")
    row = CardBucket.objects.get()
    assert row.card_key == card_key("Paris", "France of capital")

    post_update(client, "Paris", "France of capital", 2)
    assert PracticeLog.objects.get().card_key == row.card_key


def test_cross_origin_requests_are_allowed(client):
    resp = client.get("/", HTTP_ORIGIN="http://localhost:5173")
    assert resp.status_code == 200
    assert resp["Access-Control-Allow-Origin"] == "*"
