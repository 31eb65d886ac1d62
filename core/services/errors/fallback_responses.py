"""Fallback responses for error scenarios."""
from typing import Dict


class FallbackResponses:
    """Predefined user-facing messages for common error scenarios."""

    CHINESE_RESPONSES: Dict[str, str] = {
        "acquisition_failed": "多次尝试获取答案失败",
        "no_answer_found": "无法获取有效答案，请稍后重试",
        "verification_error": "答案验证失败，请稍后重试或使用快速模式",
        "malformed_answer": "模型返回的答案格式有误，请稍后重试",
        "model_not_configured": "模型服务未配置，请联系管理员",
        "method_not_allowed": "Method not allowed",
        "search_error": "搜索过程中发生错误，请稍后重试",
    }

    ENGLISH_RESPONSES: Dict[str, str] = {
        "acquisition_failed": "Failed to get an answer after multiple attempts.",
        "no_answer_found": "Unable to get a valid answer. Please try again later.",
        "verification_error": "Answer verification failed. Please try again or use fast mode.",
        "malformed_answer": "The model returned an answer in an unexpected format. Please try again.",
        "model_not_configured": "The model service is not configured. Please contact the administrator.",
        "method_not_allowed": "Method not allowed",
        "search_error": "An error occurred during the search. Please try again later.",
    }

    @classmethod
    def get_response(cls, error_type: str, language: str = "chinese") -> str:
        """
        Get fallback response for error type.

        Args:
            error_type: Type of error (no_answer_found, verification_error, etc.)
            language: Response language (chinese or english)

        Returns:
            Fallback response text
        """
        responses = cls.CHINESE_RESPONSES if language.lower() == "chinese" else cls.ENGLISH_RESPONSES
        return responses.get(error_type, responses["search_error"])

    @classmethod
    def detect_language(cls, text: str) -> str:
        """Detect language from text."""
        is_chinese = any('\u4e00' <= char <= '\u9fff' for char in text or "")
        return "chinese" if is_chinese else "english"
