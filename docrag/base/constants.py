""" All Application Constants declare here... """

# Python Packages
from decouple import config


# App Constants
APP_ENV                         =   config('APP_ENV')
APP_SECRET_KEY                  =   config('APP_SECRET_KEY')


# Swagger Constants
SWAGGER_APP_PROPS       =   {
                                "name": "DocRAG",
                                "version": "1.0",
                                "description": "Document RAG API: upload documents, \
                                select them by id, name or tag, and ask questions \
                                answered by a rate-limited SambaNova model."
                            }


# Logging Constants
LOG_LEVEL                       =   config('LOG_LEVEL', default = 'INFO')
LOG_FILE                        =   config('LOG_FILE', default = '')


# Database Constants
DATABASE_URL                    =   config('DATABASE_URL', default = '')
DB_HOST                         =   config('DB_HOST', default = 'localhost')
DB_PORT                         =   config('DB_PORT', default = '5432')
DB_NAME                         =   config('DB_NAME', default = 'docrag')
DB_USER                         =   config('DB_USER', default = 'postgres')
DB_PASSWORD                     =   config('DB_PASSWORD', default = '')


# AWS Constants
AWS_ACCESS_KEY_ID		        =	config('AWS_ACCESS_KEY_ID')
AWS_SECRET_ACCESS_KEY	        =	config('AWS_SECRET_ACCESS_KEY')
AWS_REGION				        =	config('AWS_REGION')
AWS_S3_BUCKET_NAME	            =	config('AWS_S3_BUCKET_NAME')


# AI Provider (sambanova | anthropic)
AI_PROVIDER                     =   config('AI_PROVIDER', default = 'sambanova')


# SambaNova Constants (OpenAI-compatible API)
SAMBANOVA_API_KEY               =   config('SAMBANOVA_API_KEY')
SAMBANOVA_BASE_URL              =   config('SAMBANOVA_BASE_URL', default = 'https://api.sambanova.ai/v1')
SAMBANOVA_LLM_MODEL             =   config('SAMBANOVA_LLM_MODEL', default = 'Meta-Llama-3.3-70B-Instruct')
SAMBANOVA_EMBEDDING_MODEL       =   config('SAMBANOVA_EMBEDDING_MODEL', default = 'E5-Mistral-7B-Instruct')


# Anthropic Constants
ANTHROPIC_API_KEY               =   config('ANTHROPIC_API_KEY', default = '')
ANTHROPIC_DEFAULT_MODEL         =   config('ANTHROPIC_DEFAULT_MODEL', default = 'claude-sonnet-4-5')


# Rate Limiting Constants (shared by every outbound AI call)
RATE_LIMIT_DELAY_MS             =   config('RATE_LIMIT_DELAY_MS', default = 8000, cast = int)
MAX_REQUESTS_PER_MINUTE         =   config('MAX_REQUESTS_PER_MINUTE', default = 5, cast = int)
PROVIDER_MAX_RETRIES            =   config('PROVIDER_MAX_RETRIES', default = 2, cast = int)


# Document Cache Constants
DOCUMENT_CACHE_TTL_SECONDS      =   config('DOCUMENT_CACHE_TTL_SECONDS', default = 30, cast = float)


# Query Constants
ALLOW_KNOWLEDGE_ONLY_ANSWERS    =   config('ALLOW_KNOWLEDGE_ONLY_ANSWERS', default = False, cast = bool)


# Upload Constants
MAX_UPLOAD_SIZE_BYTES           =   config('MAX_UPLOAD_SIZE_BYTES', default = 10 * 1024 * 1024, cast = int)
S3_DOCUMENT_PREFIX              =   "documents"

ALLOWED_MIME_TYPES              =   {
                                        "text/plain",
                                        "text/markdown",
                                        "text/csv",
                                        "application/csv",
                                        "application/pdf",
                                        "application/msword",
                                        "application/vnd.openxmlformats-officedocument.wordprocessingml.document",
                                        "application/octet-stream"
                                    }

ALLOWED_EXTENSIONS              =   {"txt", "md", "csv", "pdf", "doc", "docx"}
