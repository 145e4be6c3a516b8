"""Textos fixos das respostas de consulta de número (árabe).

Markdown do Telegram é habilitado no envio; os textos não usam marcação.
"""

from __future__ import annotations

from app.domain.contact import LineType

LINE_TYPE_LABELS: dict[LineType, str] = {
    LineType.MOBILE: "محمول",
    LineType.LANDLINE: "أرضي",
}

WRONG_REGION_REPLY = "⚠ هذا الرقم ليس رقماً سورياً. ارسل رقم سوري صحيح."

UNPARSEABLE_REPLY = (
    "⚠ لم أستطع تحليل الرقم. ارسله بصيغة مثل: 0933123456 أو +963933123456"
)

CONTACT_FOUND_TEMPLATE = "✅ الاسم: {name}\n📞 النوع: {label}\n🇸🇾 الرقم: {number}"

CONTACT_NOT_FOUND_TEMPLATE = (
    "📞 الرقم: {number}\n📱 النوع: {label}\nℹ لم يتم العثور على الاسم في قاعدة البيانات"
)

INTERNAL_ERROR_TEMPLATE = "❌ خطأ داخلي: {message}"
