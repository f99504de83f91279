# -*- coding: utf-8 -*-
"""Arabic translations."""

AR_TRANSLATIONS = {
    # Dialogs
    "dialog.error": "خطأ",
    "dialog.success": "نجاح",
    "dialog.confirm": "تأكيد",

    # Login
    "login.title": "مرحباً",
    "login.subtitle": "سجّل الدخول لتعبئة النموذج",
    "login.roll_number": "الرقم الجامعي",
    "login.roll_number_placeholder": "أدخل الرقم الجامعي",
    "login.name": "الاسم الكامل",
    "login.name_placeholder": "أدخل اسمك الكامل",
    "login.submit": "دخول",
    "login.processing": "جارٍ المعالجة...",
    "login.both_required": "الرقم الجامعي والاسم مطلوبان",
    "login.unexpected_error": "حدث خطأ غير متوقع. يرجى المحاولة مرة أخرى.",

    # Registration
    "registration.success": "تم إنشاء المستخدم بنجاح",
    "registration.failed": "فشل إنشاء المستخدم",

    # Wizard
    "wizard.loading": "جارٍ تحميل النموذج...",
    "wizard.greeting": "تم تسجيل الدخول باسم {name} ({roll_number})",
    "wizard.logout": "تسجيل الخروج",
    "wizard.back_to_login": "العودة لتسجيل الدخول",
    "wizard.previous": "السابق",
    "wizard.next": "التالي",
    "wizard.submit": "إرسال",
    "wizard.section_number": "القسم {number}",
    "wizard.progress": "القسم {current} من {total}",
    "wizard.success_title": "تم بنجاح!",
    "wizard.success_message": "تم إرسال النموذج بنجاح. شكراً لمشاركتك!",
    "wizard.redirecting": "جارٍ العودة إلى الصفحة الرئيسية...",

    # Error summary
    "errors.summary_one": "يوجد خطأ واحد يجب تصحيحه",
    "errors.summary_many": "يوجد {count} أخطاء يجب تصحيحها",
    "errors.go_to_field": "انتقل إلى الحقل",

    # Fields
    "field.select_option": "-- اختر خياراً --",
    "field.date_hint": " (يوم-شهر-سنة)",
    "field.phone_hint": " ({prefix})",
    "field.phone_placeholder": "{prefix} رقم الهاتف",
    "field.char_count": "{count}/{max} حرفاً",

    # Validation
    "validation.required": "{label} مطلوب",
    "validation.min_length": "يجب أن يحتوي {label} على {min} أحرف على الأقل",
    "validation.max_length": "يجب ألا يتجاوز {label} {max} حرفاً",
    "validation.email": "يرجى إدخال بريد إلكتروني صحيح",
    "validation.phone": "يرجى إدخال رقم هاتف صحيح",

    # Errors
    "error.schema.load_failed": "فشل تحميل النموذج. يرجى المحاولة مرة أخرى.",
    "error.schema.empty": "لا يحتوي هذا النموذج على أقسام.",
    "error.schema.invalid": "النموذج المستلم من الخادم غير صالح.",
    "error.api.connection": "خطأ في الاتصال. يرجى التحقق من اتصالك بالإنترنت.",
    "error.api.timeout": "انتهت مهلة الاتصال. يرجى المحاولة مرة أخرى.",
    "error.unexpected": "حدث خطأ غير متوقع.",
}
