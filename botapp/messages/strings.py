"""Korean UI strings shown by the exhibition booking bot."""

from __future__ import annotations

from typing import Dict

from reservations.errors import BookingError

# Buttons
BUTTON_ADMIN = "🔑 관리자"
BUTTON_LOGOUT = "🚪 로그아웃"
BUTTON_BACK_TO_CALENDAR = "📅 날짜 선택으로"
BUTTON_BACK_TO_DAY = "⬅️ 시간 선택으로"
BUTTON_RESERVE = "✍️ 방문 예약"
BUTTON_SKIP_MESSAGE = "⏭ 메시지 없이 진행"
BUTTON_CANCEL = "취소"
BUTTON_CLOSE = "닫기"
BUTTON_EDIT_NAME = "✏️ 이름 수정"
BUTTON_EDIT_MESSAGE = "✏️ 메시지 수정"
BUTTON_SAVE = "✅ 수정 완료"
BUTTON_DELETE = "🗑 삭제"
BUTTON_CONFIRM_DELETE = "삭제"
BUTTON_FULL_SUFFIX = "마감"

# Dialog titles
TITLE_NEW_BOOKING = "방문 예약"
TITLE_EDIT_BOOKING = "예약 수정"
TITLE_ADMIN_LOGIN = "관리자 로그인"
TITLE_CONFIRM_DELETE = "예약 삭제 확인"

# Prompts
PROMPT_SELECT_DATE = "방문하실 날짜를 선택해주세요."
PROMPT_SELECT_TIME = "방문하실 시간대를 선택해주세요."
PROMPT_NAME = "이름을 입력해주세요."
PROMPT_MESSAGE = "메시지를 입력해주세요. (선택)\n관리자에게만 보이는 메시지입니다."
PROMPT_PASSWORD = "비밀번호를 입력해주세요.\n예약 수정/삭제 시 필요합니다."
PROMPT_VERIFY_PASSWORD = "수정/삭제를 위한 비밀번호를 입력해주세요."
PROMPT_NEW_NAME = "새 이름을 입력해주세요."
PROMPT_NEW_MESSAGE = "새 메시지를 입력해주세요."
PROMPT_DELETE_PASSWORD = "삭제를 위해 비밀번호를 입력해주세요."
PROMPT_ADMIN_PASSWORD = "관리자 비밀번호를 입력해주세요."
CONFIRM_DELETE_QUESTION = "정말로 이 예약을 삭제하시겠습니까? 이 작업은 되돌릴 수 없습니다."

# Labels
LABEL_NAME = "이름"
LABEL_MESSAGE = "메시지"
LABEL_ADMIN_MESSAGE = "방명록 메시지 (관리자 전용)"
LABEL_NO_MESSAGE = "메시지가 없습니다."
LABEL_NO_BOOKINGS = "아직 예약이 없습니다."
LABEL_TODAY = "📍"
LABEL_ADMIN_MODE = "👑 관리자 모드"

# Outcomes
SLOT_FULL_TITLE = "예약 마감"
SLOT_FULL_DETAIL = "이 시간대는 예약이 모두 찼습니다."
BOOKING_CREATED = "✅ 예약이 완료되었습니다."
BOOKING_UPDATED = "✅ 예약이 수정되었습니다."
BOOKING_DELETED = "🗑 예약이 삭제되었습니다."
DELETE_CANCELLED = "삭제를 취소했습니다."
ADMIN_LOGIN_SUCCESS = "✅ 관리자로 로그인했습니다."
ADMIN_LOGIN_FAILURE = "비밀번호가 올바르지 않습니다."
ADMIN_LOGGED_OUT = "로그아웃했습니다."
DIALOG_CLOSED = "진행 중인 입력을 취소했습니다."
NO_ACTIVE_DIALOG = "진행 중인 입력이 없습니다. 버튼을 눌러 시작해주세요."
STALE_ACTION = "만료된 버튼입니다. 다시 선택해주세요."
UNEXPECTED_ERROR = (
    "❌ 요청을 처리하는 중 오류가 발생했습니다.\n"
    "잠시 후 다시 시도해주세요."
)

REJECTION_TEXTS: Dict[str, str] = {
    'missing name': "이름을 입력해주세요.",
    'missing password': "비밀번호를 입력해주세요.",
    'slot full': f"{SLOT_FULL_TITLE}: {SLOT_FULL_DETAIL}",
    'password mismatch': "비밀번호가 일치하지 않습니다.",
    'unknown slot': "선택할 수 없는 시간대입니다.",
    'booking not found': "예약을 찾을 수 없습니다.",
    'nothing staged': "삭제할 예약이 선택되지 않았습니다.",
}

DELETE_PASSWORD_MISMATCH = "비밀번호가 일치하지 않아 삭제할 수 없습니다."


def rejection_text(error: BookingError) -> str:
    """Return the visitor-facing text for a core rejection."""

    return "⚠️ " + REJECTION_TEXTS.get(error.reason, error.reason)
