# Annotated nginx location block for one source/proxy pair.
# Each entry is (annotation, directive); directive may be None.
# Placeholders: {source}, {proxy}, {escaped_source}. Literal braces are doubled.

USER_AGENT = (
    "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 "
    "(KHTML, like Gecko) Chrome/127.0.0.0 Safari/537.36"
)

ACCEPT = "text/html,application/xhtml+xml,application/xml;q=0.9,image/avif,image/webp,*/*;q=0.8"

ACCEPT_LANGUAGE = "zh-CN,zh;q=0.9,en;q=0.8"

HIDDEN_RESPONSE_HEADERS = (
    ("Hide the Server header returned by the upstream", "Server"),
    ("Hide the upstream Content-Security-Policy header", "Content-Security-Policy"),
    ("Hide the upstream Content-Security-Policy-Report-Only header", "Content-Security-Policy-Report-Only"),
    ("Hide the upstream X-Frame-Options header", "X-Frame-Options"),
    ("Hide the upstream X-Content-Type-Options header", "X-Content-Type-Options"),
    ("Hide the upstream Referrer-Policy header", "Referrer-Policy"),
    ("Hide the upstream Permissions-Policy header", "Permissions-Policy"),
    ("Hide the upstream Strict-Transport-Security header", "Strict-Transport-Security"),
    ("Hide the upstream Cross-Origin-Embedder-Policy header", "Cross-Origin-Embedder-Policy"),
    ("Hide the upstream Cross-Origin-Opener-Policy header", "Cross-Origin-Opener-Policy"),
    ("Hide the upstream Cross-Origin-Resource-Policy header", "Cross-Origin-Resource-Policy"),
    ("Hide the Via header describing intermediate proxies", "Via"),
    ("Hide the X-Powered-By header describing the backend stack", "X-Powered-By"),
    ("Hide the CF-RAY header added by Cloudflare", "CF-RAY"),
    ("Hide the CF-Cache-Status header added by Cloudflare", "CF-Cache-Status"),
    ("Hide the legacy X-XSS-Protection header", "X-XSS-Protection"),
)

LOCATION_TEMPLATE = (
    ("Match every request path under the proxy domain", "location ^~ / {{"),
    ("Forward requests to the source site over HTTPS", "    proxy_pass https://{source};"),
    ("Set the Host header to the source domain", "    proxy_set_header Host {source};"),
    ("Send a common browser User-Agent upstream", f'    proxy_set_header User-Agent "{USER_AGENT}";'),
    ("Set the Referer header to the source home page", '    proxy_set_header Referer "https://{source}/";'),
    ("Set the Origin header to the source domain", '    proxy_set_header Origin "https://{source}";'),
    ("Pass the real client IP address", "    proxy_set_header X-Real-IP $remote_addr;"),
    ("Append the client IP to X-Forwarded-For", "    proxy_set_header X-Forwarded-For $proxy_add_x_forwarded_for;"),
    ("Tell the upstream which protocol the client used", "    proxy_set_header X-Forwarded-Proto $scheme;"),
    ("Forward client cookies unchanged", "    proxy_set_header Cookie $http_cookie;"),
    ("Allow protocol upgrades such as WebSocket", "    proxy_set_header Upgrade $http_upgrade;"),
    ("Pass the Connection header needed for upgrades", "    proxy_set_header Connection $http_connection;"),
    ("Disable upstream compression so bodies can be rewritten", '    proxy_set_header Accept-Encoding "";'),
    ("Send a common browser Accept header upstream", f'    proxy_set_header Accept "{ACCEPT}";'),
    ("Send a common language preference upstream", f'    proxy_set_header Accept-Language "{ACCEPT_LANGUAGE}";'),
    ("Talk to the upstream over HTTP/1.1", "    proxy_http_version 1.1;"),
    ("Size of a single proxy buffer", "    proxy_buffer_size 256k;"),
    ("Number and size of proxy buffers", "    proxy_buffers 8 256k;"),
    ("Size of busy proxy buffers", "    proxy_busy_buffers_size 256k;"),
    ("Enable SNI for the upstream connection", "    proxy_ssl_server_name on;"),
    ("Host name to send via SNI", "    proxy_ssl_name {source};"),
    ("Skip upstream certificate verification (turn on if needed)", "    proxy_ssl_verify off;"),
    (
        "Rewrite upstream redirects from the source domain to the proxy domain",
        "    proxy_redirect ~^https://{escaped_source}(.*)$ https://{proxy}$1;",
    ),
    ("Replace the source domain with the proxy domain in HTML", "    sub_filter '{source}' '{proxy}';"),
    (
        "Replace protocol-relative source URLs with the proxy domain in HTML",
        '    sub_filter "//{source}" "//{proxy}";',
    ),
    ("Replace every match instead of only the first", "    sub_filter_once off;"),
    ("Only rewrite HTML responses", "    sub_filter_types text/html;"),
    ("Rewrite the source domain in Set-Cookie to the current host", "    proxy_cookie_domain {source} $host;"),
    (
        "Rewrite the dot-prefixed source domain in Set-Cookie to the current host",
        "    proxy_cookie_domain .{source} .$host;",
    ),
    ("Keep the cookie path at the root", "    proxy_cookie_path / /;"),
) + tuple(
    (annotation, f"    proxy_hide_header {header};") for annotation, header in HIDDEN_RESPONSE_HEADERS
) + (
    ("Enable this example to customise the cache policy", "    # proxy_cache_valid 200 302 10m;"),
    ("Example cache time for 404 responses", "    # proxy_cache_valid 404 1m;"),
    ("End of this location block", "}}"),
)
