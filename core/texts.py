# Тексты ответов бота (фарси + английский). Здесь они сырые:
# экранирование под MarkdownV2 делается при сборке ответа.

SEPARATOR = "\n\n------------------------------\n\n"

WELCOME = (
    "🎉 *به ربات QR کد خوش اومدی!* 🤖\n\n"
    "من می‌تونم:\n"
    "1️⃣ متن یا لینکتو به QR کد تبدیل کنم.\n"
    "2️⃣ محتوای QR کد رو از عکست بخونم.\n\n"
    "فقط کافیه یه متن، لینک یا عکس QR کد برام بفرستی! 😊"
    + SEPARATOR
    + "🎉 *Welcome to QR Code Bot!* 🤖\n\n"
    "I can:\n"
    "1️⃣ Convert your text or link to a QR code.\n"
    "2️⃣ Read QR code content from your image.\n\n"
    "Just send me a text, link, or QR code image! 😊"
)

DECODE_FOUND = (
    "📸 *محتوای QR کدت پیدا شد!* 🎉\n\n"
    "این چیزیه که توی QR کد نوشته شده:"
    + SEPARATOR
    + "📸 *QR Code Content Found!* 🎉\n\n"
    "Here’s what’s in the QR code:"
)

DECODE_APOLOGY = (
    "❌ *اوپس! یه مشکلی پیش اومد* 😓\n\n"
    "نتونستم محتوای QR کد رو بخونم. لطفاً این موارد رو چک کن:\n"
    "📌 تصویرت باید توی فرمت PNG، JPEG یا WebP باشه.\n"
    "📌 حجم تصویرت باید کمتر از 10 مگابایت باشه.\n"
    "📌 QR کد باید کامل و واضح باشه (زیاد برش نخورده باشه، تار نباشه یا کیفیتش پایین نباشه).\n"
    "💡 اگه عکست تاره، لطفاً یه نسخه باکیفیت‌تر بفرست."
    + SEPARATOR
    + "❌ *Oops! Something went wrong* 😓\n\n"
    "I couldn’t read the QR code. Please check these:\n"
    "📌 The image must be in PNG, JPEG, or WebP format.\n"
    "📌 The image size must be under 10MB.\n"
    "📌 The QR code must be complete and clear (not overly cropped, blurry, or low quality).\n"
    "💡 If the image is blurry, please send a higher-quality version.\n\n"
    "Error: {error}"
)

EMPTY_TEXT = (
    "❌ *یه متن یا لینک درست بفرست!* 😅\n\n"
    "متنی که فرستادی خالیه."
    + SEPARATOR
    + "❌ *Please send a proper text or link!* 😅\n\n"
    "The text you sent is empty."
)

TEXT_TOO_LONG = (
    "❌ *متنت خیلی طولانیه!* 📏\n\n"
    "لطفاً متنی کوتاه‌تر از {limit} کاراکتر بفرست."
    + SEPARATOR
    + "❌ *Your text is too long!* 📏\n\n"
    "Please send a text shorter than {limit} characters."
)

INVALID_URL = (
    "❌ *لینک معتبر نیست!* 🔗\n\n"
    "لطفاً یه آدرس اینترنتی درست بفرست."
    + SEPARATOR
    + "❌ *Invalid URL!* 🔗\n\n"
    "Please send a valid URL."
)

QR_READY_CAPTION = (
    "📷 *QR کدت آماده شد!* 🎉\n\n"
    "این QR کد برای متن یا لینکت ساخته شد."
    + SEPARATOR
    + "📷 *Your QR code is ready!* 🎉\n\n"
    "This QR code was created for your text or link."
)

GENERATE_APOLOGY = (
    "❌ *اوپس! مشکلی پیش اومد* 😓\n\n"
    "نتونستم QR کد رو بسازم. لطفاً دوباره امتحان کن یا یه متن کوتاه‌تر بفرست."
    + SEPARATOR
    + "❌ *Oops! Something went wrong* 😓\n\n"
    "I couldn’t create the QR code. Please try again or send a shorter text."
)

# Сообщения ошибок, которые уходят в "Error: ..." внутри DECODE_APOLOGY
ERR_IMAGE_TOO_LARGE = (
    "حجم تصویر بیشتر از 10 مگابایت است. لطفاً یه تصویر کوچیک‌تر بفرست. / "
    "The image is larger than 10MB. Please send a smaller one."
)
ERR_IMAGE_FORMAT = (
    "فرمت تصویر باید PNG، JPEG یا WebP باشه. فرمت فعلی: {content_type} / "
    "The image must be PNG, JPEG or WebP. Current format: {content_type}"
)
ERR_EMPTY_QR = "محتوای QR کد خالیه. / The QR code is empty."
