"""Fixed identifiers shared by the channel layer and the platform bridges."""

CHANNEL_NAME = "cn.jokeo.mi_music/umeng_config"

GET_UMENG_CONFIG = "getUmengConfig"

# Android: bundled under the application package's assets/ directory
ANDROID_RESOURCE_NAME = "umeng_config.properties"
ANDROID_ASSETS_DIR = "assets"
ANDROID_APP_KEY_FIELD = "umeng.appkey"
ANDROID_CHANNEL_FIELD = "umeng.channel"

# iOS: resource "umeng_config" of type "plist" in the main bundle
IOS_RESOURCE_NAME = "umeng_config"
IOS_RESOURCE_TYPE = "plist"
IOS_APP_KEY_FIELD = "UMAppKey"
IOS_CHANNEL_FIELD = "UMChannel"
